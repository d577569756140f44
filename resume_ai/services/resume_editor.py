"""
Edits applied to a ResumeDocument on behalf of the editor.
Each edit returns a new document; the input is never mutated.
"""

from resume_ai.domain.models import ResumeDocument


def append_bullets(resume: ResumeDocument, index: int, bullets: list[str]) -> ResumeDocument:
    """
    Append bullets to one experience entry's description.

    Blank lines already in the description are dropped first and blank
    bullets are ignored; existing content is never overwritten.
    Raises IndexError if `index` does not name an experience entry.
    """
    if not 0 <= index < len(resume.experience):
        raise IndexError(f"No experience entry at position {index}")

    updated = resume.model_copy(deep=True)
    entry = updated.experience[index]
    entry.description = [line for line in entry.description if line.strip()] + [
        bullet for bullet in bullets if bullet.strip()
    ]
    return updated
