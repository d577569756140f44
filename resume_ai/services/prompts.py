"""
Prompt builders, one per AI operation.
Each returns a (system, user) message pair.
"""

from typing import NamedTuple

from resume_ai.domain.models import ResumeDocument

SUGGESTION_COUNT = 5
MIN_FEEDBACK_ITEMS = 3
MAX_FEEDBACK_ITEMS = 5


class Prompt(NamedTuple):
    system: str
    user: str


def build_extraction_prompt(raw_text: str) -> Prompt:
    return Prompt(
        system=(
            "You are an expert résumé parser. "
            "Convert the résumé text you are given into structured JSON that matches the "
            "provided schema exactly. "
            "If a field is missing from the text, emit it as an empty string, or as an empty "
            "array for lists. Never omit a field and never use null. "
            "Put each experience bullet in its own description entry. "
            "Do not invent information that is not in the text."
        ),
        user=(
            f"## Résumé Text\n{raw_text}\n\n"
            "Parse the résumé now."
        ),
    )


def build_fit_analysis_prompt(resume: ResumeDocument, job_description: str) -> Prompt:
    return Prompt(
        system=(
            "You are an expert hiring manager and résumé coach. "
            "Analyze the candidate's résumé against the job description as a strict and honest "
            "evaluator. Do not inflate the score. "
            "Return an integer score from 0 to 100, "
            "a 2-3 sentence summary of the fit, "
            f"{MIN_FEEDBACK_ITEMS}-{MAX_FEEDBACK_ITEMS} key strengths, "
            f"{MIN_FEEDBACK_ITEMS}-{MAX_FEEDBACK_ITEMS} specific, actionable improvements that "
            "would tailor the résumé to this job, "
            "and the important keywords that appear in the job description but are missing "
            "from the résumé."
        ),
        user=(
            f"## Résumé JSON\n{resume.to_json()}\n\n"
            f"## Job Description\n{job_description}\n\n"
            "Evaluate this résumé now."
        ),
    )


def build_suggestion_prompt(role: str) -> Prompt:
    return Prompt(
        system=(
            "You are an expert résumé writer. "
            f"Write exactly {SUGGESTION_COUNT} professional résumé bullet points for the given role. "
            "Start each with a strong action verb and include a quantifiable result where it "
            "is plausible. "
            f"Return ONLY a JSON array of {SUGGESTION_COUNT} strings, with no wrapping object."
        ),
        user=f"## Role\n{role}",
    )
