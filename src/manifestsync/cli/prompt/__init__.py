from manifestsync.cli.prompt.interactive import QuestionaryPrompter
from manifestsync.cli.prompt.static import StaticPrompter

__all__ = ["QuestionaryPrompter", "StaticPrompter"]
