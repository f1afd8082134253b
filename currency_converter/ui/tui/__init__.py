"""Rich-based Terminal UI for the Currency Converter.

Modules:
- app.py: Interactive loop feeding the converter session
- display.py: Rich renderables for panels/tables
- renderer.py: Formatting utilities
- input_handler.py: Command parsing and completion
- config.py: TUI styles and constants
"""

__all__ = [
    "app",
    "display",
    "renderer",
    "input_handler",
    "config",
]
