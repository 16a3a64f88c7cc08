"""Prompt construction for document summarization."""

SYSTEM_PROMPT = (
    "You are an expert document summarizer. "
    "Provide clear, concise summaries and actionable insights."
)

KEY_INSIGHT_COUNT = 5

_PROMPT_TEMPLATE = """Please analyze and summarize the following document: "{file_name}"

Document content:
{text}

Please provide your response in the following JSON format:
{{
  "summary": "A comprehensive summary of the document (2-3 paragraphs, 150-300 words)",
  "keyInsights": [
{insight_lines}
  ]
}}

Guidelines:
- The summary should capture the main points, arguments, and conclusions
- Key insights should be specific, actionable, and directly derived from the content
- Focus on the most important information that would be valuable to someone who needs to understand the document quickly
- Maintain the original meaning and context
- Use clear, professional language
- Each insight should be a complete, standalone statement

Please respond with valid JSON only, no additional text."""


def build_prompt(text: str, file_name: str) -> str:
    """Build the summarization prompt for any provider.

    The document text is embedded verbatim; the response schema asks for a
    ``summary`` string and a ``keyInsights`` list of five items.

    Args:
        text: Document text.
        file_name: Original document name.

    Returns:
        Prompt string.
    """
    insight_lines = ",\n".join(
        f'    "Key insight {i} (actionable and specific)"'
        for i in range(1, KEY_INSIGHT_COUNT + 1)
    )
    return _PROMPT_TEMPLATE.format(
        file_name=file_name,
        text=text,
        insight_lines=insight_lines,
    )
