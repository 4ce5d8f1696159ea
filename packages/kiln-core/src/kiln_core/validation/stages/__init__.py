from .application import ApplicationStructureStage
from .base import BaseStage
from .config import ConfigurationStage
from .deploy import DeployPipelineStage
from .gateway import GatewayConfigStage
from .infrastructure import InfrastructureStage

__all__ = [
    "ApplicationStructureStage",
    "BaseStage",
    "ConfigurationStage",
    "DeployPipelineStage",
    "GatewayConfigStage",
    "InfrastructureStage",
]
