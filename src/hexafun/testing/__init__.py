"""Testing DSL — fluent, memoizing assertions over container use cases."""

from hexafun.testing.harness import HarnessAssertionError, HarnessUsageError, HexaTest, UseCaseTest

__all__ = ["HarnessAssertionError", "HarnessUsageError", "HexaTest", "UseCaseTest"]
