from .runner import BenchmarkRunner, RunResult, random_graph

__all__ = ["BenchmarkRunner", "RunResult", "random_graph"]
