from infrastructure.scenario.base_loader import ScenarioLoaderBase
from infrastructure.scenario.json_loader import JsonScenarioLoader
from infrastructure.scenario.loader_registry import ScenarioLoaderRegistry
from infrastructure.scenario.yaml_loader import YamlScenarioLoader

__all__ = [
    "ScenarioLoaderBase",
    "ScenarioLoaderRegistry",
    "YamlScenarioLoader",
    "JsonScenarioLoader",
]
