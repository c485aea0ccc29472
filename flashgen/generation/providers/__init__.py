from flashgen.generation.providers.mock import MockContentGenerator
from flashgen.generation.providers.performance import PerformanceTestGenerator

__all__ = ["MockContentGenerator", "PerformanceTestGenerator"]
