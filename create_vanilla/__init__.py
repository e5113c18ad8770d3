"""create-vanilla -- scaffold a vanilla Vite project, optionally with TypeScript."""

__version__ = "0.1.0"
