"""
Centralized configuration
"""
import os
import logging
from pathlib import Path
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

# Setup debug logger for configuration
_config_logger = logging.getLogger('config')

# Check for DEBUG_MODE early (before .env is loaded, check environment)
_debug_mode = os.getenv('DEBUG_MODE', 'false').lower() == 'true'
if _debug_mode:
    logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    _config_logger.setLevel(logging.DEBUG)
    _config_logger.debug("DEBUG_MODE enabled - verbose logging active")

# .env is looked up in the current working directory
_env_file = Path.cwd() / '.env'

if _env_file.exists():
    _dotenv_result = load_dotenv(_env_file)
    _config_logger.debug(f"Loaded .env from: {_env_file.absolute()} ({_dotenv_result})")
else:
    _config_logger.debug(f".env not found at {_env_file.absolute()}, using environment and defaults")

# Provider identifiers
PROVIDER_OPENAI = 'openai'
PROVIDER_GEMINI = 'gemini'
SUPPORTED_PROVIDERS = (PROVIDER_OPENAI, PROVIDER_GEMINI)

# Default models used when MODEL is left empty
DEFAULT_OPENAI_MODEL = 'gpt-4o-mini'
DEFAULT_GEMINI_MODEL = 'gemini-1.5-flash'

# Placeholder replaced by the text to translate in the prompt template
PROMPT_PLACEHOLDER = '[TEXTE]'

# Trailing line of the default prompt; stripped to build the OpenAI system message
PROMPT_TEXT_LINE = f"Texte à traduire : {PROMPT_PLACEHOLDER}"

DEFAULT_PROMPT = (
    "Tu es un traducteur expert de Donjons & Dragons 5e. Traduis le texte suivant en français "
    "fluide et immersif, en conservant absolument TOUTE la mise en forme HTML originale "
    "(ne modifie AUCUNE balise, garde-les intactes). Utilise les termes officiels français de "
    "D&D 5e : 'hit points' → 'points de vie', 'saving throw' → 'jet de sauvegarde', "
    "'Armor Class' → 'classe d'armure', 'proficiency bonus' → 'bonus de maîtrise', "
    "'spell slots' → 'emplacements de sorts', etc. Garde le ton narratif et les mécaniques "
    "intactes. Ne résume pas, n'ajoute pas de commentaires, traduis fidèlement le contenu fourni."
    f"\n\n{PROMPT_TEXT_LINE}"
)

# Load from environment variables with defaults
LLM_PROVIDER = os.getenv('LLM_PROVIDER', PROVIDER_OPENAI)
API_KEY = os.getenv('API_KEY', '')
MODEL = os.getenv('MODEL', '')  # empty: provider default
TRANSLATION_PROMPT = os.getenv('TRANSLATION_PROMPT', DEFAULT_PROMPT)
REQUEST_TIMEOUT = int(os.getenv('REQUEST_TIMEOUT', '120'))

# Batch settings: documents per batch and pause between batches
BATCH_SIZE = int(os.getenv('BATCH_SIZE', '5'))
BATCH_COOLDOWN_MS = int(os.getenv('BATCH_COOLDOWN_MS', '1000'))

# Prefix of the destination collection label and of every created document name
TARGET_LABEL_PREFIX = os.getenv('TARGET_LABEL_PREFIX', '[FR] ')

# Ownership given to newly created destination collections
DEFAULT_COLLECTION_OWNERSHIP = {"PLAYER": "OBSERVER"}

# Debug mode (reload after .env is loaded)
DEBUG_MODE = os.getenv('DEBUG_MODE', 'false').lower() == 'true'

if DEBUG_MODE or _debug_mode:
    _config_logger.setLevel(logging.DEBUG)
    _config_logger.debug("=" * 60)
    _config_logger.debug("LOADED CONFIGURATION VALUES:")
    _config_logger.debug(f"   LLM_PROVIDER: {LLM_PROVIDER}")
    _config_logger.debug(f"   MODEL: {MODEL}")
    _config_logger.debug(f"   API_KEY: {'***' + API_KEY[-4:] if API_KEY else '(not set)'}")
    _config_logger.debug(f"   BATCH_SIZE: {BATCH_SIZE}")
    _config_logger.debug(f"   BATCH_COOLDOWN_MS: {BATCH_COOLDOWN_MS}")
    _config_logger.debug(f"   REQUEST_TIMEOUT: {REQUEST_TIMEOUT}")
    _config_logger.debug(f"   TARGET_LABEL_PREFIX: {TARGET_LABEL_PREFIX!r}")
    _config_logger.debug("=" * 60)


@dataclass(frozen=True)
class ProviderConfiguration:
    """Settings of one translation run, built once and passed explicitly.

    Attributes:
        provider: Provider identifier ('openai' or 'gemini')
        api_key: Credential sent to the provider
        model: Model identifier (empty string selects the provider default)
        prompt_template: Prompt containing exactly one PROMPT_PLACEHOLDER
        request_timeout: HTTP timeout in seconds
    """
    provider: str = PROVIDER_OPENAI
    api_key: str = ''
    model: str = ''
    prompt_template: str = DEFAULT_PROMPT
    request_timeout: float = 120.0

    @classmethod
    def from_env(cls) -> "ProviderConfiguration":
        """Build the configuration from the loaded environment values."""
        return cls(
            provider=LLM_PROVIDER.lower(),
            api_key=API_KEY,
            model=MODEL,
            prompt_template=TRANSLATION_PROMPT,
            request_timeout=float(REQUEST_TIMEOUT),
        )

    def masked_key(self) -> str:
        """Credential suitable for logs."""
        return '***' + self.api_key[-4:] if self.api_key else '(not set)'


@dataclass(frozen=True)
class BatchSettings:
    """Batch size and cooldown used by the scheduler."""
    batch_size: int = 5
    cooldown_ms: int = 1000
    label_prefix: str = '[FR] '

    @classmethod
    def from_env(cls) -> "BatchSettings":
        return cls(
            batch_size=BATCH_SIZE,
            cooldown_ms=BATCH_COOLDOWN_MS,
            label_prefix=TARGET_LABEL_PREFIX,
        )


def count_placeholders(template: Optional[str]) -> int:
    """Number of PROMPT_PLACEHOLDER occurrences in a template."""
    return (template or '').count(PROMPT_PLACEHOLDER)
