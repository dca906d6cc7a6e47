"""Shared (non-domain) exceptions."""


class ToolError(Exception):
    """Collaborator invocation failed."""

    def __init__(self, tool: str, message: str):
        self.tool = tool
        super().__init__(f"[{tool}] {message}")


class DataSourceError(ToolError):
    """City dataset could not be loaded or does not contain the requested city."""

    def __init__(self, message: str):
        super().__init__("poi_source", message)


class NoPlanError(Exception):
    """Export requested before any plan was generated."""


class UnknownCityError(DataSourceError):
    """Requested city key is not in the dataset."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Unknown city: {key}")
