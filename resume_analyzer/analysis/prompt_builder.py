def build_prompt(template: str, resume_text: str) -> str:
    """Render the analysis template around the resume text.

    The text is inserted verbatim: no truncation, escaping or trimming.
    """
    return template.format(resume_text=resume_text)
