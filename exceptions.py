"""
Custom exception hierarchy for clearer error handling.
Catch and rethrow with these in your modules for better diagnostics.
"""
class WallRepairError(Exception):
    """Base class for wall repair errors."""

class ConfigError(WallRepairError):
    pass

class InputFormatError(WallRepairError):
    pass

class ScenarioLoadError(WallRepairError):
    pass

class GraphBuildError(WallRepairError):
    pass

class MatchingError(WallRepairError):
    pass

class MipSolveError(WallRepairError):
    pass

class ReportWriteError(WallRepairError):
    pass
