DEFAULT_MODEL = "gpt-4-turbo-preview"
TEMPERATURE = 0.7

# Lines of each file's diff kept in the prompt
MAX_DIFF_LINES = 50
TRUNCATION_MARKER = "... (diff truncated for brevity)"

# Models and their respective token limits
MODEL_TOKEN_LIMITS = {
    "gpt-3.5-turbo": 4192,
    "gpt-3.5-turbo-16k": 16384,
    "gpt-4": 8192,
    "gpt-4-turbo-preview": 127514,
    "gpt-4-1106-preview": 127514,
    "gpt-4o": 127514,
    "gpt-4o-mini": 127514,
}

PROMPT_DETAILED = "Please analyze these git changes and generate a detailed technical changelog in markdown format."

PROMPT_CONCISE = ("Please analyze these git changes and generate a concise, high-level changelog in markdown format. "
                  "Focus only on the most important changes and keep each entry brief (1-2 lines max).")

PROMPT_DETAILS = """
Git diff summary (files changed):
{file_status}

{code_changes}

Commits:
{commits}

Guidelines:
- Focus on user-facing changes and significant technical updates
- Use clear, non-technical language where possible
- Group similar changes together
- {depth_guideline}
- Use bullet points for better readability"""

PROMPT_CODE_CHANGES = """Detailed code changes:
{code_changes}"""

GUIDELINE_DETAILED = "Provide technical details and impact"
GUIDELINE_CONCISE = "Keep it brief and high-level"

PROMPT_CHANGELOG_SYSTEM_DETAILED = "You are a technical writer creating detailed changelogs."

PROMPT_CHANGELOG_SYSTEM_CONCISE = ("You are a technical writer creating concise, user-friendly release notes. "
                                   "Keep the output brief and focused on key changes.")
