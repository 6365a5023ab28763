"""
Prompts for Resume Generation.

Each PromptTemplate turns a validated request into the exact instruction
sent to the model and names the contract the answer must satisfy.
Builders are pure functions of the request.

Templates:
- GENERATION_TEMPLATE: new design from a free-text prompt (may use the logo tool)
- REFINEMENT_TEMPLATE: modify the caller's current HTML/CSS from feedback
- FEEDBACK_SUMMARY_TEMPLATE: summarize feedback and fold it into a template
- COMPANY_DOMAIN_TEMPLATE: domain lookup sub-call used by the logo tool
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from pydantic import BaseModel

from resumeforge.ai.resume.contracts import (
    COMPANY_DOMAIN,
    COMPANY_LOGO_QUERY,
    FEEDBACK_SUMMARY,
    FEEDBACK_SUMMARY_REQUEST,
    GENERATED_RESUME,
    GENERATION_REQUEST,
    REFINED_RESUME,
    REFINEMENT_REQUEST,
    CompanyLogoQuery,
    FeedbackSummaryRequest,
    GenerationRequest,
    RefinementRequest,
    SchemaContract,
)

R = TypeVar("R", bound=BaseModel)

COMPANY_LOGO_TOOL_NAME = "getCompanyLogo"

# Minimum text/background contrast the refiner must keep (WCAG AA, body text)
MIN_CONTRAST_RATIO = "4.5:1"


@dataclass(frozen=True)
class PromptTemplate(Generic[R]):
    """
    A named instruction template bound to its input and output contracts.

    Attributes:
        name: Template identifier (used in logs)
        input_contract: Contract of the request the builder accepts
        output_contract: Contract the model's answer is validated against
        builder: Pure function request -> instruction text
    """
    name: str
    input_contract: SchemaContract
    output_contract: SchemaContract
    builder: Callable[[R], str]

    def render(self, request: R) -> str:
        """Render the instruction text for a validated request."""
        return self.builder(request)


# ---------------------------------------------------------------------------
# GENERATION
# ---------------------------------------------------------------------------

def build_generation_prompt(request: GenerationRequest) -> str:
    """
    Build the instruction for a brand-new resume design.

    Args:
        request: Validated generation request

    Returns:
        Formatted prompt string
    """
    return f"""You are an expert resume designer who builds print-ready, single-page resume templates in HTML and CSS.

User Prompt: "{request.prompt_text}"

Follow these steps:

**1. Detect the target organization**
Read the user prompt and decide whether it names a company or organization the resume is aimed at (e.g., "a resume for a marketing role at Google").

**2. Derive the branding**
- If an organization is named, call the `{COMPANY_LOGO_TOOL_NAME}` tool with its name. Use the returned logo URL in an <img> in the header, and base the color palette and overall style on that organization's brand colors and visual identity.
- If the tool returns an empty string, do not include a logo; still use the organization's known brand colors.
- If no organization is named, choose a tasteful, professional palette that matches the style the user described.

**3. Write the HTML (field "design")**
- The whole resume lives inside ONE root container: `<div class="resume-container">...</div>`. No <html>, <head> or <body> tags.
- Use clear placeholder text for personal details: "Your Name", "Job Title", "email@example.com", "(555) 123-4567", "City, Country", "Company Name", "Jan 2020 - Present".
- Use a two-region layout: a main column (summary, experience, projects) and a sidebar (contact, skills, education, languages). Make the separation between the two regions obvious.
- Use semantic elements (header, section, h1-h3, ul/li) so the text can be edited in place.

**4. Write the CSS (field "css")**
- Completely self-contained: NO @import, NO external fonts, NO url() pointing to other resources. Use system font stacks (e.g., -apple-system, "Segoe UI", Roboto, Helvetica, Arial, sans-serif).
- Size `.resume-container` for a standard A4 page: width 210mm, min-height 297mm, with sensible print margins, and add `@page {{ size: A4; margin: 0; }}`.
- Implement the two regions with CSS grid or flexbox, and keep high contrast between text and background colors.

**Output**
Return a JSON object with exactly two fields, "css" and "design". Do not wrap the code in markdown code blocks and do not add explanations."""


GENERATION_TEMPLATE: PromptTemplate[GenerationRequest] = PromptTemplate(
    name="generateResumeTemplatePrompt",
    input_contract=GENERATION_REQUEST,
    output_contract=GENERATED_RESUME,
    builder=build_generation_prompt,
)


# ---------------------------------------------------------------------------
# REFINEMENT
# ---------------------------------------------------------------------------

def build_refinement_prompt(request: RefinementRequest) -> str:
    """
    Build the instruction for refining the caller's current resume.

    The current markup is embedded exactly as the caller sent it, including
    any edits made by hand since the last generation.
    """
    return f"""You are an expert resume template designer. You will be given the current HTML and CSS of a resume, along with user feedback. Your task is to modify the HTML and CSS to incorporate the user's requested changes.

**CRITICAL INSTRUCTIONS:**
1.  **Analyze Feedback:** Carefully read the user's feedback to understand the requested changes.
2.  **Modify Code:** Apply the changes directly to the provided HTML and CSS. Do not generate new code from scratch; modify the existing structure and styles.
3.  **Preserve Content:** Do not change any placeholder or user-written content (names, job titles, dates, descriptions) unless the feedback specifically asks for it.
4.  **Ensure Readability:** Keep a text/background contrast ratio of at least {MIN_CONTRAST_RATIO} everywhere.
5.  **Stay Self-Contained:** Keep the single root container and do not add external fonts, @import rules or other external resources.
6.  **Output Complete Code:** Return the complete, modified HTML and CSS as the JSON fields "html" and "css". Do not return partial snippets or explanations.

**Current HTML:**
```html
{request.current_markup}
```

**Current CSS:**
```css
{request.current_style}
```

**User Feedback:**
"{request.feedback}"

Now, generate the refined HTML and CSS based on the user's feedback."""


REFINEMENT_TEMPLATE: PromptTemplate[RefinementRequest] = PromptTemplate(
    name="refineResumeTemplatePrompt",
    input_contract=REFINEMENT_REQUEST,
    output_contract=REFINED_RESUME,
    builder=build_refinement_prompt,
)


# ---------------------------------------------------------------------------
# FEEDBACK SUMMARY
# ---------------------------------------------------------------------------

def build_feedback_summary_prompt(request: FeedbackSummaryRequest) -> str:
    """Build the instruction for summarizing feedback on a template."""
    return f"""You are an AI expert in resume generation and feedback analysis.

You will receive a resume template and user feedback on the template.
Your task is to summarize the feedback and refine the template based on the feedback.

Resume Template:
{request.resume_template}

User Feedback:
{request.user_feedback}

Return a JSON object with two fields:
- "summary": a concise summary of the user feedback (one to three sentences)
- "refined_template": the complete resume template with the feedback applied"""


FEEDBACK_SUMMARY_TEMPLATE: PromptTemplate[FeedbackSummaryRequest] = PromptTemplate(
    name="summarizeResumeFeedbackPrompt",
    input_contract=FEEDBACK_SUMMARY_REQUEST,
    output_contract=FEEDBACK_SUMMARY,
    builder=build_feedback_summary_prompt,
)


# ---------------------------------------------------------------------------
# COMPANY DOMAIN (logo tool sub-call)
# ---------------------------------------------------------------------------

def build_company_domain_prompt(query: CompanyLogoQuery) -> str:
    return (
        f'What is the official domain for the company named "{query.company_name}"? '
        "Please provide only the domain name (e.g., 'google.com'), without protocol or path."
    )


COMPANY_DOMAIN_TEMPLATE: PromptTemplate[CompanyLogoQuery] = PromptTemplate(
    name="getCompanyDomainPrompt",
    input_contract=COMPANY_LOGO_QUERY,
    output_contract=COMPANY_DOMAIN,
    builder=build_company_domain_prompt,
)
