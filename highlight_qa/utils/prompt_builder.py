from __future__ import annotations

QUESTION_LABEL = "Questions:\n"

SYSTEM_INSTRUCTION = """
You are a helpful assistant that answers questions about highlighted text from PDFs and websites.
Be concise and informative.
Prefer clarity over verbosity.
Do not use LaTeX formatting.
If there are no explicit questions, consider what questions could be asked and answer them.
""".strip()


def build_prompt(query: str) -> str:
    """Prefix the highlighted text with the question label. Empty text still gets the label."""
    return f"{QUESTION_LABEL}{query}"


def build_local_prompt(instruction: str, prompt: str) -> str:
    # /api/generate has no message roles, so the instruction leads the prompt text.
    return f"{instruction}\n\n{prompt}"
