from .morocco import create_test_graph

__all__ = ["create_test_graph"]
