from polspell.services.use_cases.spelling import SpellingCheckUseCase
from polspell.services.use_cases.tagging import TaggingUseCase

__all__ = ["SpellingCheckUseCase", "TaggingUseCase"]
