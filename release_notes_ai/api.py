import os
from loguru import logger
import openai
import tiktoken

from .constants import DEFAULT_MODEL, MODEL_TOKEN_LIMITS, TEMPERATURE

CONFIG_DIR = os.path.expanduser("~/.config/release-notes-ai")


class ConfigurationError(Exception):
    """Raised when no OpenAI API key can be resolved."""


def load_api_key(config_dir=None):
    config_dir = config_dir or CONFIG_DIR
    try:
        with open(os.path.join(config_dir, "openai_api_key"), "r", encoding='utf-8') as f:
            api_key = f.read().strip()
        return api_key or None
    except FileNotFoundError:
        return None


def get_api_key(api_key=None, environ=None, config_dir=None):
    """
    Resolves the OpenAI API key. Priority:
    1. the --api-key command line option
    2. OPENAI_API_KEY from the GitHub Actions secrets, when running there
    3. OPENAI_API_KEY from .env or the environment, then the saved key file
    """
    if api_key:
        return api_key

    environ = os.environ if environ is None else environ

    if environ.get("GITHUB_ACTIONS") == "true":
        if not environ.get("OPENAI_API_KEY"):
            raise ConfigurationError(
                "OPENAI_API_KEY not found in GitHub Actions secrets. Please add it to your repository secrets.")
        return environ["OPENAI_API_KEY"]

    api_key = environ.get("OPENAI_API_KEY") or load_api_key(config_dir)
    if not api_key:
        raise ConfigurationError(
            "OPENAI_API_KEY not found. Please provide it via --api-key option or set it in .env file")
    return api_key


def create_client(api_key):
    return openai.OpenAI(api_key=api_key)


def num_tokens_from_string(text, model):
    """Return the number of tokens used by a single chat message."""
    try:
        encoding = tiktoken.encoding_for_model(model)
    except KeyError:
        encoding = tiktoken.get_encoding("cl100k_base")

    tokens_per_message = 4 # every message follows <|start|>{role/name}\n{content}<|end|>\n
    num_tokens = len(encoding.encode(text))
    num_tokens += 3        # every reply is primed with <|start|>assistant<|message|>
    num_tokens += tokens_per_message
    return num_tokens


def check_token_limit(prompt, model):
    try:
        num_tokens = num_tokens_from_string(prompt, model)
    except Exception as e:
        logger.warning(f"Could not estimate prompt size: {e}")
        return None
    limit = MODEL_TOKEN_LIMITS.get(model)
    logger.debug(f"Prompt length: {len(prompt)} chars, ~{num_tokens} tokens")
    if limit and num_tokens > limit:
        logger.warning(f"Prompt went over max token limit ({num_tokens} > {limit}), the request may be rejected.")
    return num_tokens


def get_completion(client, system, prompt, model=DEFAULT_MODEL):
    completion = client.chat.completions.create(
        model=model,
        temperature=TEMPERATURE,
        messages=[
            {
                "role": "system", "content": system
            },
            {
                "role": "user", "content": prompt
            },
        ])
    if not completion.choices:
        return None
    return completion.choices[0].message.content
