import shlex
from dataclasses import dataclass
from functools import cached_property

from loguru import logger
from unidiff import PatchSet, UnidiffParseError

from .utils import run


class GitError(Exception):
    """Raised when a git command exits with a non-zero status."""


@dataclass(frozen=True)
class FileChange:
    file: str
    diff: str

    @cached_property
    def _patch(self):
        try:
            return PatchSet.from_string(self.diff)
        except UnidiffParseError:
            return PatchSet("")

    @property
    def additions(self):
        return sum(patched_file.added for patched_file in self._patch)

    @property
    def deletions(self):
        return sum(patched_file.removed for patched_file in self._patch)


def git(*args):
    cmd = "git " + " ".join(shlex.quote(arg) for arg in args)
    result = run(cmd)
    if result.returncode != 0:
        raise GitError(f"`{cmd}` failed: {result.stderr.decode('utf-8', errors='ignore').strip()}")
    return result.stdout.decode('utf-8', errors='replace')


def get_changed_files(from_tag, to_tag):
    return [file for file in git("diff", "--name-only", f"{from_tag}..{to_tag}").split("\n") if file]


def get_file_diff(from_tag, to_tag, file):
    return git("diff", f"{from_tag}..{to_tag}", "--", file)


def get_file_changes(from_tag, to_tag):
    """
    Collects the diff of every file changed between the two revisions, in the
    order git lists them. Files whose diff cannot be fetched are skipped.
    """
    changes = []
    for file in get_changed_files(from_tag, to_tag):
        try:
            diff = get_file_diff(from_tag, to_tag, file)
        except GitError as e:
            logger.warning(f"Failed to get diff for file {file}: {e}")
            continue
        if not diff:
            continue
        change = FileChange(file=file, diff=diff)
        logger.opt(lazy=True).debug(
            "{path}: +{added} -{removed}",
            path=lambda: change.file,
            added=lambda: change.additions,
            removed=lambda: change.deletions)
        changes.append(change)
    return changes


def get_file_status(from_tag, to_tag):
    return git("diff", f"{from_tag}..{to_tag}", "--name-status")


def get_commit_log(from_tag, to_tag):
    return git("log", f"{from_tag}..{to_tag}", "--pretty=format:%h - %s")
