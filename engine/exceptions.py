# engine/exceptions.py

class DependencyGraphError(Exception):
    pass


class UnsupportedFormat(DependencyGraphError):
    def __init__(self, format_name: str) -> None:
        self.format_name = format_name
        super().__init__(f"Unsupported export format: {format_name}")
