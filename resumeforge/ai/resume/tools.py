"""
Company Logo Tool - Resolves a company name to a logo URL.

Two steps:
1. Ask the model (constrained sub-call) for the company's official domain
2. Build the logo URL from a fixed template, no network call needed

The tool is registered with the generation call and invoked by the model
itself, zero or more times. It never raises: any failure degrades to ""
so generation continues without branding.
"""

import logging
import re
import uuid
from typing import Optional
from urllib.parse import urlsplit

from resumeforge.core.config import settings
from resumeforge.ai.monitoring.logger import AILogger, ai_logger
from resumeforge.ai.providers.base import AIProvider, AITool
from resumeforge.ai.resume.contracts import (
    COMPANY_LOGO_RESULT,
    CompanyLogoQuery,
)
from resumeforge.ai.resume.prompts import COMPANY_DOMAIN_TEMPLATE, COMPANY_LOGO_TOOL_NAME

NOT_FOUND = ""

_DOMAIN_RE = re.compile(
    r"^(?=.{4,253}$)([a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?\.)+[a-z]{2,63}$"
)

COMPANY_LOGO_TOOL_DESCRIPTION = (
    "Gets a company's logo URL from its name. It first determines the company's "
    "domain and then uses a logo API to build the image URL. Returns an empty "
    "string when no logo can be found."
)


def normalize_domain(raw: Optional[str]) -> Optional[str]:
    """
    Normalize a model-provided domain, or return None if it is malformed.

    Accepts "google.com", "https://www.google.com/about", "Google.com." and
    returns "google.com" for all of them.
    """
    if not raw:
        return None

    value = raw.strip().lower()
    if "://" in value:
        value = urlsplit(value).netloc
    else:
        value = value.split("/", 1)[0]

    value = value.split(":", 1)[0].rstrip(".")
    if value.startswith("www."):
        value = value[4:]

    if not _DOMAIN_RE.match(value):
        return None
    return value


def resource_url_for(domain: str, url_template: Optional[str] = None) -> str:
    """Deterministic logo URL for a domain."""
    return (url_template or settings.LOGO_URL_TEMPLATE).format(domain=domain)


class CompanyLogoTool:
    """
    Logo lookup capability for the generation model.

    Usage:
        tool = CompanyLogoTool(provider)
        url = await tool.resolve("Spotify")   # "https://logo.clearbit.com/spotify.com"
        generator_tools = [tool.as_tool()]
    """

    def __init__(
        self,
        provider: AIProvider,
        logger: Optional[logging.Logger] = None,
        url_template: Optional[str] = None,
        monitor: Optional[AILogger] = None,
    ):
        self._provider = provider
        self._logger = logger or logging.getLogger("resumeforge.ai.tools")
        self._url_template = url_template
        self._monitor = monitor or ai_logger

    async def resolve(self, company_name: str) -> str:
        """
        Resolve a company name to a logo URL.

        Returns:
            The logo URL, or "" if the domain could not be determined
        """
        request_id = str(uuid.uuid4())[:8]
        self._logger.info(f"[{COMPANY_LOGO_TOOL_NAME}] Finding domain for: {company_name}")

        try:
            query = CompanyLogoQuery(company_name=company_name)
            prompt = COMPANY_DOMAIN_TEMPLATE.render(query)
            self._monitor.log_request(request_id, "domain_lookup", prompt, getattr(self._provider, "model", "unknown"))

            response = await self._provider.generate_structured(
                prompt=prompt,
                output_schema=COMPANY_DOMAIN_TEMPLATE.output_contract.model,
                temperature=0.0,
                max_tokens=100,
            )
            self._monitor.log_response(request_id, "domain_lookup", response)

            result = COMPANY_DOMAIN_TEMPLATE.output_contract.validate(response.parsed)
            if not result.ok:
                self._logger.warning(
                    f"[{COMPANY_LOGO_TOOL_NAME}] Could not determine domain for {company_name}: {result.reason}"
                )
                return NOT_FOUND

            domain = normalize_domain(result.value.domain)
            if domain is None:
                self._logger.warning(
                    f"[{COMPANY_LOGO_TOOL_NAME}] Malformed domain for {company_name}: {result.value.domain!r}"
                )
                return NOT_FOUND

            self._logger.info(f"[{COMPANY_LOGO_TOOL_NAME}] Found domain: {domain}")
            logo_url = resource_url_for(domain, self._url_template)

            checked = COMPANY_LOGO_RESULT.validate({"logo_url": logo_url})
            if not checked.ok:
                self._logger.warning(f"[{COMPANY_LOGO_TOOL_NAME}] {checked.reason} ({logo_url!r})")
                return NOT_FOUND
            return checked.value.logo_url

        except Exception as e:
            self._logger.error(f"[{COMPANY_LOGO_TOOL_NAME}] Error fetching logo for {company_name}: {e}")
            return NOT_FOUND

    async def _handle(self, query: CompanyLogoQuery) -> str:
        return await self.resolve(query.company_name)

    def as_tool(self) -> AITool:
        """Register this capability with a structured generation call."""
        return AITool(
            name=COMPANY_LOGO_TOOL_NAME,
            description=COMPANY_LOGO_TOOL_DESCRIPTION,
            input_model=CompanyLogoQuery,
            handler=self._handle,
        )
