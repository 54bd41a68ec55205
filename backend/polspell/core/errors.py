from __future__ import annotations


class ResourceUnavailableError(RuntimeError):
    """A spelling or morphology resource could not be loaded or reached.

    Raised by the dictionary-backed collaborators and propagated unchanged
    through the spelling and tagging services, so a failed lookup is never
    mistaken for a verdict on the word.
    """

    def __init__(self, resource: str, detail: str):
        super().__init__(f"{resource}: {detail}")
        self.resource = resource
        self.detail = detail
