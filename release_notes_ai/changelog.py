import sys
from loguru import logger
import openai

from .api import check_token_limit, get_completion
from .constants import (DEFAULT_MODEL, GUIDELINE_CONCISE, GUIDELINE_DETAILED, MAX_DIFF_LINES, PROMPT_CHANGELOG_SYSTEM_CONCISE,
                        PROMPT_CHANGELOG_SYSTEM_DETAILED, PROMPT_CODE_CHANGES, PROMPT_CONCISE, PROMPT_DETAILED, PROMPT_DETAILS,
                        TRUNCATION_MARKER)
from .git_utils import GitError, get_commit_log, get_file_changes, get_file_status


class EmptyResponseError(Exception):
    """Raised when the model answers without any content."""


def summarize_changes(changes):
    """
    Joins the diff of every file into a single block, keeping only the first
    MAX_DIFF_LINES lines of each one to stay within the model's token limits.
    """
    summary = ''
    for change in changes:
        diff_lines = change.diff.split('\n')
        summary += f"\nFile: {change.file}\n"
        summary += '\n'.join(diff_lines[:MAX_DIFF_LINES]) + '\n'
        if len(diff_lines) > MAX_DIFF_LINES:
            summary += f"\n{TRUNCATION_MARKER}\n"
    return summary


def system_prompt(detailed):
    return PROMPT_CHANGELOG_SYSTEM_DETAILED if detailed else PROMPT_CHANGELOG_SYSTEM_CONCISE


def build_prompt(file_status, code_changes, commits, detailed=False):
    """Returns the instruction preamble and the details block for the user message."""
    preamble = PROMPT_DETAILED if detailed else PROMPT_CONCISE
    details = PROMPT_DETAILS.format(
        file_status=file_status,
        code_changes=PROMPT_CODE_CHANGES.format(code_changes=code_changes) if detailed else '',
        commits=commits,
        depth_guideline=GUIDELINE_DETAILED if detailed else GUIDELINE_CONCISE)
    return preamble, details


def generate_changelog(client, from_tag, to_tag, detailed=False, model=DEFAULT_MODEL):
    try:
        file_status = get_file_status(from_tag, to_tag)
        commits = get_commit_log(from_tag, to_tag)

        changes = get_file_changes(from_tag, to_tag)
        logger.info(f"Collected diffs of {len(changes)} files between {from_tag} and {to_tag}")
        code_changes = summarize_changes(changes)

        preamble, details = build_prompt(file_status, code_changes, commits, detailed)
        prompt = preamble + details
        check_token_limit(prompt, model)

        logger.info(f"Using {model} to generate a {'detailed' if detailed else 'concise'} changelog...")
        changelog = get_completion(client, system_prompt(detailed), prompt, model=model)
        if not changelog:
            raise EmptyResponseError("No content received from OpenAI")
        return changelog
    except (GitError, openai.OpenAIError, EmptyResponseError) as e:
        logger.error(f"Error generating changelog: {e}")
        sys.exit(1)
