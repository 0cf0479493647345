"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import ClientOptions, create_client

from deficiency_tracker.adapters.supabase_intake_log_repository import (
    SupabaseIntakeLogRepository,
)
from deficiency_tracker.config import Settings, parse_demographic
from deficiency_tracker.domain.nutrients import DemographicGroup
from deficiency_tracker.services.analysis import DeficiencyAnalyzer
from deficiency_tracker.services.intake_log import IntakeLogService
from deficiency_tracker.services.knowledge_base import StaticKnowledgeBase


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    knowledge_base: StaticKnowledgeBase
    analyzer: DeficiencyAnalyzer
    intake_log_service: IntakeLogService
    default_demographic: DemographicGroup


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url,
        resolved_settings.supabase_service_key,
        options=ClientOptions(
            postgrest_client_timeout=resolved_settings.store_timeout_seconds
        ),
    )
    knowledge_base = StaticKnowledgeBase()
    analyzer = DeficiencyAnalyzer(knowledge_base)
    intake_log_service = IntakeLogService(
        repository=SupabaseIntakeLogRepository(supabase_client),
        analyzer=analyzer,
        timezone_name=resolved_settings.timezone,
    )
    return AppContainer(
        settings=resolved_settings,
        knowledge_base=knowledge_base,
        analyzer=analyzer,
        intake_log_service=intake_log_service,
        default_demographic=parse_demographic(
            resolved_settings.default_demographic, DemographicGroup.ADULT_FEMALE
        ),
    )
