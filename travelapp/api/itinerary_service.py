from travelapp.core.config import ApiSettings
from travelapp.core.pipeline import ItineraryPipeline, PlanningOutcome
from travelapp.core.planner import TripPlanner
from travelapp.core.sanitizer import DescriptionSanitizer
from travelapp.core.schemas import TripRequest
from travelapp.services import assemble_tool_catalog, create_default_providers
from langchain_openai import ChatOpenAI
from langchain_xai import ChatXAI


REQUIRED_SETTINGS = [
    "xai_api_key",
]


def _ensure_configuration(settings: ApiSettings) -> None:
    missing = [field for field in REQUIRED_SETTINGS if not getattr(settings, field)]
    if missing:
        joined = ", ".join(missing)
        raise RuntimeError(
            f"Missing required environment variables for itinerary generation: {joined}"
        )


class ItineraryBundle:
    """Container for the itinerary pipeline and its long-lived dependencies.

    Built once per process. The model clients, the compiled planner agent and
    the tool catalog are shared read-only between concurrent requests; every
    request gets its own pipeline run.

    Attributes:
        settings: configuration with model endpoints and tool credentials
        sanitizer_llm: lightweight local model used to clean descriptions
        llm: capability-rich model driving the tool-augmented planning call
        tools: tool catalog assembled from all configured providers
        pipeline: orchestrator combining sanitizer, planner, decoder and fallback
    """

    def __init__(self, settings: ApiSettings) -> None:
        _ensure_configuration(settings)
        settings.apply_langsmith_tracing()

        self.settings = settings

        self.sanitizer_llm = ChatOpenAI(
            model=settings.sanitizer_model,
            base_url=settings.sanitizer_base_url,
            api_key=settings.sanitizer_api_key,
            temperature=0,
            timeout=settings.request_timeout,
        )
        self.llm = ChatXAI(
            model=settings.planner_model,
            temperature=0,
            api_key=settings.ensure("xai_api_key"),
            timeout=settings.request_timeout,
        )

        self.tools = assemble_tool_catalog(create_default_providers(settings))
        self.sanitizer = DescriptionSanitizer(self.sanitizer_llm)
        self.planner = TripPlanner.from_llm(self.llm, self.tools)
        self.pipeline = ItineraryPipeline(self.sanitizer, self.planner)

    def __repr__(self) -> str:
        return (
            f"ItineraryBundle(planner_model='{self.settings.planner_model}', "
            f"sanitizer_model='{self.settings.sanitizer_model}', "
            f"tools={[tool.name for tool in self.tools]})"
        )

    async def create_itinerary(self, request: TripRequest) -> PlanningOutcome:
        """Run the generation pipeline for one request; never raises for model failures."""

        return await self.pipeline.generate(request)
