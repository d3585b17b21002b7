from training_generator.generation.auto_selector import AutoSelector
from training_generator.generation.client_base import BaseModelClient
from training_generator.generation.factory import ModelClientFactory
from training_generator.generation.generator import TrainingGenerator
from training_generator.generation.prompt_builder import PromptBuilder

__all__ = [
    "AutoSelector",
    "BaseModelClient",
    "ModelClientFactory",
    "PromptBuilder",
    "TrainingGenerator",
]
