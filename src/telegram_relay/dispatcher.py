"""EventDispatcher - Main orchestrator for the Telegram relay."""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from .core import (
    BinaryPayload,
    CAPTION_LIMIT,
    ChunkSplitter,
    Event,
    FieldKind,
    MessageSender,
    PayloadResolver,
    TEXT_LIMIT,
    TextPayload,
    truncate,
)
from .errors import ResolutionError
from .interfaces import EventSource, ValueResolver

logger = logging.getLogger(__name__)

ErrorHandler = Callable[[str, dict[str, Any]], None]


@dataclass
class DispatchResult:
    """Outcome of relaying one event.

    Attributes:
        event_id: The event's identifier.
        fields_sent: Field kinds that reached at least one send attempt.
        failed_sends: Sends the API rejected or that failed in transit.
    """

    event_id: str
    fields_sent: int = 0
    failed_sends: int = 0

    @property
    def ok(self) -> bool:
        return self.fields_sent > 0


class EventDispatcher:
    """Relays events to the bot API, one message per field kind or chunk.

    Failures are contained at the smallest scope: a failed send does not
    stop later chunks, a failed fetch does not stop later kinds, and a
    failed event does not stop later events.
    """

    def __init__(
        self,
        resolver: PayloadResolver,
        sender: MessageSender,
        values: ValueResolver,
        error_handler: ErrorHandler | None = None,
    ):
        """
        Initialize the dispatcher.

        Args:
            resolver: Extracts typed payloads from events.
            sender: Performs individual sends.
            values: Resolves per-event settings (long_message policy).
            error_handler: Optional callback receiving (message, context)
                for event-level errors.
        """
        self.resolver = resolver
        self.sender = sender
        self.values = values
        self.error_handler = error_handler

        self.text_splitter = ChunkSplitter(max_length=TEXT_LIMIT)
        self.caption_splitter = ChunkSplitter(max_length=CAPTION_LIMIT)

        self._source: EventSource | None = None

    def attach(self, source: EventSource) -> None:
        """Register this dispatcher with an event source."""
        self._source = source
        source.on_events(self.process)

    def start(self) -> None:
        """Start receiving events from the attached source."""
        if self._source is None:
            raise RuntimeError("No event source attached. Call attach() first.")
        logger.info("Starting event dispatcher...")
        self._source.connect()

    def stop(self) -> None:
        """Stop receiving events."""
        if self._source is not None:
            logger.info("Stopping event dispatcher...")
            self._source.disconnect()

    def process(self, events: Iterable[Event]) -> list[DispatchResult]:
        """
        Process a batch of events in order.

        Args:
            events: The inbound events.

        Returns:
            One DispatchResult per event.
        """
        results = []
        for event in events:
            result = DispatchResult(event_id=event.id)
            try:
                self._relay(event, result)
            except Exception as e:
                # Keep counts for fields already sent before the failure
                logger.exception(f"[{event.id}] Unexpected error: {e}")
                if self.error_handler is not None:
                    self.error_handler(
                        f"Failed to process event {event.id}: {e}",
                        {"event_id": event.id, "payload": dict(event.payload)},
                    )
            results.append(result)
        return results

    def process_event(self, event: Event) -> DispatchResult:
        """
        Relay a single event.

        Args:
            event: The event to relay.

        Returns:
            DispatchResult for the event.
        """
        result = DispatchResult(event_id=event.id)
        self._relay(event, result)
        return result

    def _relay(self, event: Event, result: DispatchResult) -> None:
        """Send every applicable field of an event, updating result as it goes."""
        logger.info(f"[{event.id}] Processing event")
        split = self.values.resolve(event, "long_message") == "split"

        for kind in FieldKind:
            try:
                payload = self.resolver.resolve(event, kind)
            except ResolutionError as e:
                logger.error(f"[{event.id}] Skipping {kind.value}: {e}")
                continue

            if payload is None:
                continue

            if isinstance(payload, TextPayload):
                outcomes = self._send_text(event, payload, split)
            else:
                try:
                    outcomes = self._send_binary(event, payload, split)
                finally:
                    payload.handle.release()

            if outcomes:
                result.fields_sent += 1
                result.failed_sends += sum(1 for ok in outcomes if not ok)

        if not result.ok:
            self._report_error(
                f"No valid key found in event {dict(event.payload)!r}",
                {"event_id": event.id, "payload": dict(event.payload)},
            )
        else:
            logger.info(
                f"[{event.id}] Sent {result.fields_sent} field(s), "
                f"{result.failed_sends} failed send(s)"
            )

    def _send_text(self, event: Event, payload: TextPayload, split: bool) -> list[bool]:
        """
        Send a text payload, split or truncated.

        Returns:
            Success flag per send attempted.
        """
        if split:
            messages = self.text_splitter.split(payload.text)
        else:
            messages = [truncate(payload.text, TEXT_LIMIT)]

        if len(messages) > 1:
            logger.info(f"[{event.id}] Sending text in {len(messages)} chunk(s)")

        outcomes = []
        for i, message in enumerate(messages):
            logger.debug(f"[{event.id}] Text {i+1}/{len(messages)} ({len(message)} chars)")
            outcome = self.sender.send(event, FieldKind.TEXT, {"text": message})
            outcomes.append(outcome.ok)
        return outcomes

    def _send_binary(self, event: Event, payload: BinaryPayload, split: bool) -> list[bool]:
        """
        Send a binary payload with its caption.

        Under the split policy only the first caption chunk rides with the
        content; the rest follow as plain text messages.

        Returns:
            Success flag per send attempted.
        """
        caption = payload.caption
        overflow: list[str] = []

        if caption is not None:
            if split:
                chunks = self.caption_splitter.split(caption)
                caption = chunks[0] if chunks else None
                overflow = chunks[1:]
            else:
                caption = truncate(caption, CAPTION_LIMIT)

        params = {"caption": caption} if caption is not None else {}
        files = {payload.kind.value: (payload.handle.filename, payload.handle.file)}

        outcomes = [self.sender.send(event, payload.kind, params, files=files).ok]

        if overflow:
            logger.info(f"[{event.id}] Sending {len(overflow)} caption overflow message(s)")
        for message in overflow:
            outcomes.append(self.sender.send(event, FieldKind.TEXT, {"text": message}).ok)

        return outcomes

    def _report_error(self, message: str, context: dict[str, Any]) -> None:
        """Log an event-level error and pass it to the error handler."""
        logger.error(message)
        if self.error_handler is not None:
            self.error_handler(message, context)
