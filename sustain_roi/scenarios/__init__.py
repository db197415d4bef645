from .store import SavedScenario, ScenarioNotFoundError, ScenarioStore

__all__ = ["SavedScenario", "ScenarioNotFoundError", "ScenarioStore"]
