from dataclasses import dataclass, field


@dataclass(frozen=True)
class TextPart:
    """A textual content segment."""

    text: str


@dataclass(frozen=True)
class InlineImagePart:
    """Binary image data attached inline to a prompt."""

    data: str
    mime_type: str
    encoding: str = "base64"


ContentPart = TextPart | InlineImagePart


@dataclass(frozen=True)
class Prompt:
    """System instruction plus ordered content parts for one model call."""

    system_instruction: str = ""
    parts: list[ContentPart] = field(default_factory=list)

    @property
    def text(self) -> str:
        """All text parts concatenated, for logging and inspection."""
        return "".join(p.text for p in self.parts if isinstance(p, TextPart))

    @property
    def images(self) -> list[InlineImagePart]:
        return [p for p in self.parts if isinstance(p, InlineImagePart)]
