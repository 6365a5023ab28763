"""
Gemini Provider - Google's GenAI SDK.

All calls go through the async surface (client.aio) so a generation never
blocks the event loop while the model is thinking.
"""

import time
import json
import logging
from typing import Any, Dict, List, Optional, Type

from google import genai
from google.genai import types
from pydantic import BaseModel

from resumeforge.core.config import settings
from resumeforge.ai.resume.sanitizer import unwrap_code_fence
from resumeforge.ai.providers.base import (
    AIProvider,
    AIProviderError,
    AIResponse,
    AITool,
    ProviderType,
    TokenUsage,
)

logger = logging.getLogger("resumeforge.ai.gemini")

# Python annotation -> Gemini schema type, for tool parameter declarations
_SCHEMA_TYPES = {
    str: types.Type.STRING,
    int: types.Type.INTEGER,
    float: types.Type.NUMBER,
    bool: types.Type.BOOLEAN,
}


class GeminiProvider(AIProvider):
    provider_type = ProviderType.GEMINI

    def __init__(
        self,
        model: str = None,
        api_key: str = None,
        max_tool_rounds: int = None,
    ):
        self.model = model or settings.GEMINI_MODEL
        self.api_key = api_key or settings.GEMINI_API_KEY
        self.max_tool_rounds = max_tool_rounds if max_tool_rounds is not None else settings.GEMINI_MAX_TOOL_ROUNDS

        if self.api_key:
            self._client = genai.Client(
                api_key=self.api_key,
                http_options=types.HttpOptions(timeout=settings.AI_REQUEST_TIMEOUT * 1000),
            )
            logger.info(f"Gemini provider initialized with model: {self.model}")
        else:
            self._client = None
            logger.warning("Gemini API key not configured")

    async def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 1024,
        **kwargs
    ) -> AIResponse:
        start_time = time.time()

        if not self._client:
            return self._error("API key missing", start_time)

        try:
            config = types.GenerateContentConfig(
                temperature=temperature,
                max_output_tokens=max_tokens,
                system_instruction=system_prompt,
            )

            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=config,
            )

            return AIResponse(
                content=response.text or "",
                provider=self.provider_type,
                model=self.model,
                usage=self._extract_usage(response),
                latency_ms=self._measure_latency(start_time),
                success=True,
                raw_response=response,
            )

        except Exception as e:
            logger.error(f"Gemini generation failed: {e}")
            return self._error(str(e), start_time)

    async def generate_structured(
        self,
        prompt: str,
        output_schema: Type[BaseModel],
        tools: Optional[List[AITool]] = None,
        system_prompt: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 8192,
        **kwargs
    ) -> AIResponse:
        start_time = time.time()

        if not self._client:
            raise AIProviderError("Gemini API key missing", self.provider_type)

        tools = tools or []
        tools_by_name = {tool.name: tool for tool in tools}

        if tools:
            # Gemini does not combine function calling with JSON mode, so the
            # schema goes into the instruction and the final text is parsed.
            config = types.GenerateContentConfig(
                temperature=temperature,
                max_output_tokens=max_tokens,
                system_instruction=system_prompt,
                tools=[types.Tool(function_declarations=[self._declare_tool(t) for t in tools])],
            )
            prompt = f"{prompt}\n\n{self._json_instruction(output_schema)}"
        else:
            config = types.GenerateContentConfig(
                temperature=temperature,
                max_output_tokens=max_tokens,
                system_instruction=system_prompt,
                response_mime_type="application/json",
                response_schema=output_schema,
            )

        contents: List[types.Content] = [
            types.Content(role="user", parts=[types.Part.from_text(text=prompt)])
        ]
        usage = TokenUsage()
        tool_calls = 0
        rounds = 0
        tools_disabled = False

        try:
            while True:
                response = await self._client.aio.models.generate_content(
                    model=self.model,
                    contents=contents,
                    config=config,
                )
                usage = usage + self._extract_usage(response)
                rounds += 1

                calls = response.function_calls or []
                if not calls or tools_disabled:
                    break

                contents.append(response.candidates[0].content)
                parts = []
                if rounds > self.max_tool_rounds:
                    # Decline the pending calls and ask once more with calling turned off
                    logger.warning(
                        f"Tool round limit reached ({self.max_tool_rounds}), "
                        f"declining {len(calls)} pending call(s)"
                    )
                    for call in calls:
                        parts.append(types.Part.from_function_response(
                            name=call.name,
                            response={"error": "Tool call limit reached. Answer now without calling tools."},
                        ))
                    config = self._without_function_calling(config)
                    tools_disabled = True
                else:
                    for call in calls:
                        tool_calls += 1
                        result = await self._run_tool(tools_by_name, call.name, dict(call.args or {}))
                        parts.append(types.Part.from_function_response(name=call.name, response=result))
                contents.append(types.Content(role="user", parts=parts))

        except Exception as e:
            logger.error(f"Gemini structured generation failed: {e}")
            raise AIProviderError(str(e), self.provider_type) from e

        content = self._response_text(response)
        return AIResponse(
            content=content,
            provider=self.provider_type,
            model=self.model,
            usage=usage,
            latency_ms=self._measure_latency(start_time),
            success=True,
            parsed=self._parse_json(content),
            raw_response=response,
            metadata={"rounds": rounds, "tool_calls": tool_calls},
        )

    # --- PRIVATE HELPERS ---

    async def _run_tool(
        self,
        tools_by_name: Dict[str, AITool],
        name: str,
        arguments: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Run one model-requested tool call; failures are reported back to the model."""
        tool = tools_by_name.get(name)
        if tool is None:
            logger.warning(f"Model requested unknown tool: {name}")
            return {"error": f"Unknown tool: {name}"}

        logger.info(f"Running tool {name} with args {arguments}")
        try:
            return {"result": await tool.invoke(arguments)}
        except Exception as e:
            logger.warning(f"Tool {name} failed: {e}")
            return {"error": str(e)}

    def _declare_tool(self, tool: AITool) -> types.FunctionDeclaration:
        properties = {}
        required = []
        for field_name, info in tool.input_model.model_fields.items():
            properties[field_name] = types.Schema(
                type=_SCHEMA_TYPES.get(info.annotation, types.Type.STRING),
                description=info.description,
            )
            if info.is_required():
                required.append(field_name)

        return types.FunctionDeclaration(
            name=tool.name,
            description=tool.description,
            parameters=types.Schema(
                type=types.Type.OBJECT,
                properties=properties,
                required=required,
            ),
        )

    def _json_instruction(self, output_schema: Type[BaseModel]) -> str:
        schema = json.dumps(output_schema.model_json_schema(), indent=2)
        return (
            "When you are done calling tools, respond ONLY with a valid JSON object "
            f"matching this JSON schema:\n{schema}"
        )

    def _without_function_calling(self, config: types.GenerateContentConfig) -> types.GenerateContentConfig:
        """Same config, but the model may no longer call tools and has to answer."""
        return config.model_copy(update={
            "tool_config": types.ToolConfig(
                function_calling_config=types.FunctionCallingConfig(mode=types.FunctionCallingConfigMode.NONE),
            ),
        })

    def _response_text(self, response) -> str:
        # response.text is None when the last turn only holds function calls
        try:
            return (response.text or "").strip()
        except ValueError:
            return ""

    def _parse_json(self, content: str) -> Optional[Dict[str, Any]]:
        if not content:
            return None

        content = unwrap_code_fence(content)

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.warning(f"Model returned invalid JSON: {e}")
            return None

        if not isinstance(data, dict):
            logger.warning(f"Model returned JSON {type(data).__name__}, expected object")
            return None
        return data

    def _extract_usage(self, response):
        metadata = response.usage_metadata
        prompt_t = (metadata.prompt_token_count or 0) if metadata else 0
        comp_t = (metadata.candidates_token_count or 0) if metadata else 0
        return TokenUsage(prompt_tokens=prompt_t, completion_tokens=comp_t)

    def _error(self, msg, start_time):
        return self._create_error_response(
            error=msg, model=self.model, latency_ms=self._measure_latency(start_time)
        )


# Singleton instance
gemini_provider = GeminiProvider()
