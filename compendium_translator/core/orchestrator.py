"""Compendium translation orchestrator."""
import logging
from typing import Optional

from compendium_translator.config import (
    BatchSettings,
    DEFAULT_COLLECTION_OWNERSHIP,
    PROMPT_PLACEHOLDER,
    ProviderConfiguration,
    count_placeholders
)
from compendium_translator.host.interfaces import DocumentStore, Notifier
from .batch_scheduler import BatchScheduler, RunState
from .documents import extract_text_fields, rebuild_document
from .events import EventBus
from .exceptions import CollectionCreationError, ConfigError, EmptySourceError
from .llm import TranslationClient, create_translation_client
from .models import Collection, Document, RunSummary, TranslationJob

logger = logging.getLogger(__name__)


class CompendiumTranslator:
    """Translates every document of a collection into a new collection."""

    def __init__(
        self,
        config: ProviderConfiguration,
        store: DocumentStore,
        notifier: Notifier,
        settings: Optional[BatchSettings] = None,
        client: Optional[TranslationClient] = None,
        scheduler: Optional[BatchScheduler] = None,
        event_bus: Optional[EventBus] = None
    ):
        """
        Args:
            config: Provider configuration of the run
            store: Host document storage
            notifier: Host notification and progress sink
            settings: Batch size, cooldown and label prefix (defaults from the environment)
            client: Translation client (created from config on first use otherwise)
            scheduler: Batch scheduler (built from settings otherwise)
            event_bus: Optional event bus handed to the default scheduler
        """
        self.config = config
        self.store = store
        self.notifier = notifier
        self.settings = settings or BatchSettings.from_env()
        self.client = client
        self.scheduler = scheduler or BatchScheduler(
            batch_size=self.settings.batch_size,
            cooldown_ms=self.settings.cooldown_ms,
            notifier=notifier,
            event_bus=event_bus
        )

    def target_label(self, source: Collection) -> str:
        return f"{self.settings.label_prefix}{source.label}"

    def _check_preconditions(self) -> None:
        if not self.config.api_key:
            raise ConfigError("Please configure the API key in the module settings.")
        if count_placeholders(self.config.prompt_template) != 1:
            raise ConfigError(
                f"The translation prompt must contain {PROMPT_PLACEHOLDER} exactly once."
            )

    async def _fetch_documents(self, source: Collection):
        documents = await self.store.list_documents(source)
        if not documents:
            raise EmptySourceError(
                "The source compendium is empty.",
                context={"collection": source.label}
            )
        return documents

    async def _resolve_target(self, source: Collection) -> Collection:
        """Find the destination collection, creating it when absent."""
        label = self.target_label(source)
        target = await self.store.find_collection(label, source.kind)
        if target is not None:
            logger.info("Reusing destination collection '%s'", label)
            return target

        try:
            return await self.store.create_collection(
                label, source.kind, dict(DEFAULT_COLLECTION_OWNERSHIP)
            )
        except Exception as e:
            logger.exception("Could not create destination collection '%s'", label)
            raise CollectionCreationError(
                "Error while creating the destination compendium.",
                context={"label": label}
            ) from e

    def _get_client(self) -> TranslationClient:
        """Get or create the translation client of the configured provider"""
        if self.client is None:
            self.client = create_translation_client(self.config)
        return self.client

    async def translate_document(self, document: Document, target: Collection) -> Document:
        """
        Translate one document and persist it in the destination.

        Fields are translated one after the other; the first failure ends the job.

        Raises:
            ConfigError: If no client is set and the provider is unknown
        """
        client = self._get_client()
        job = TranslationJob(document=document, fields=extract_text_fields(document))
        for text_field in job.fields:
            job.translations[text_field.path] = await client.translate(text_field.text)

        data = rebuild_document(document.data, job.translations, self.settings.label_prefix)
        return await self.store.create_document(target, data)

    async def translate_compendium(self, source: Collection) -> RunSummary:
        """
        Translate a whole collection.

        The translation client stays open for further runs; release it with
        close() or use the translator as an async context manager.

        Args:
            source: Collection to translate

        Returns:
            Summary of the run

        Raises:
            ConfigError: If the configuration is unusable (nothing is fetched or created)
            CollectionCreationError: If the destination collection cannot be created
        """
        try:
            self._check_preconditions()
            self._get_client()
        except ConfigError as e:
            self.notifier.error(e.message)
            raise

        target_label = self.target_label(source)
        logger.info("Translating '%s' with %s (%s), key %s", source.label,
                    self.config.provider, self.client.model, self.config.masked_key())
        self.notifier.info(f"Starting translation of {source.label}...")

        try:
            documents = await self._fetch_documents(source)
        except EmptySourceError as e:
            self.notifier.warn(e.message)
            return RunSummary(status="empty", source_label=source.label, target_label=target_label)

        try:
            target = await self._resolve_target(source)
        except CollectionCreationError as e:
            self.notifier.error(e.message)
            raise

        self.notifier.progress("Translation in progress...", 0)

        async def job(document: Document) -> Document:
            return await self.translate_document(document, target)

        run_state: RunState = await self.scheduler.run(documents, job)

        self.notifier.progress("Translation finished!", 100)
        self.notifier.info(f"Compendium created successfully: {target.label}")
        logger.info("Run finished: %d/%d documents translated", run_state.succeeded, run_state.total)

        return RunSummary(
            status="completed",
            source_label=source.label,
            target_label=target.label,
            total=run_state.total,
            succeeded=run_state.succeeded,
            failed=run_state.failed,
            failed_names=run_state.failed_names
        )

    async def close(self):
        """Clean up resources."""
        if self.client:
            await self.client.close()

    async def __aenter__(self) -> "CompendiumTranslator":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
