"""Example model client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseModelClient and register the provider in ModelClientFactory.
"""

from typing import ClassVar

from training_generator.generation.client_base import BaseModelClient
from training_generator.generation.models import ContentPart


class ExampleClientAdapter(BaseModelClient):
    """Offline adapter that answers with a fixed, valid training page.

    No network calls. Useful for local development and tests. Prompts that
    ask for a bare output type identifier get DEFAULT_OUTPUT_TYPE back.
    """

    DEFAULT_OUTPUT_TYPE: ClassVar[str] = "flashcard-drill"

    DEFAULT_HTML: ClassVar[str] = (
        "<!DOCTYPE html>\n"
        "<html><head><meta charset=\"utf-8\"><title>Training</title>\n"
        "<style>@media print { button { display: none !important; } }</style>\n"
        "</head><body>\n"
        "<h1>Training module</h1>\n"
        "<section id=\"summary\"><h2>Summary</h2>\n"
        "<button onclick=\"window.print()\">Download Summary (PDF)</button></section>\n"
        "</body></html>"
    )

    def generate_content(
        self,
        *,
        model: str,
        system_instruction: str,
        parts: list[ContentPart],
        temperature: float,
    ) -> str:
        _ = model, temperature, parts
        if not system_instruction:
            return self.DEFAULT_OUTPUT_TYPE
        return self.DEFAULT_HTML
