"""Single-threaded event channel driving the converter state machine."""
from __future__ import annotations

import asyncio
from typing import Callable, List, Optional, Set

from currency_converter.exchange.base import BaseExchangeClient, Failed
from currency_converter.utils.errors import FailureReason
from currency_converter.utils.logging import get_logger

from .machine import initial_state, transition
from .models import ConverterEvent, ConverterState, ReceiveResult, RequestConversion

logger = get_logger(__name__)

# Called with the new snapshot and the event that produced it
StateListener = Callable[[ConverterState, object], None]

_STOP = object()


class ConverterSession:
    """Own the converter state and apply events one at a time.

    Events are queued by ``dispatch`` and applied in arrival order on the
    event loop. Conversion requests run as background tasks whose results are
    queued back as ``ReceiveResult`` events, so every mutation happens inside
    ``_apply``.
    """

    def __init__(self, client: BaseExchangeClient, state: Optional[ConverterState] = None) -> None:
        self.client = client
        self._state = state or initial_state()
        self._queue: "asyncio.Queue[object]" = asyncio.Queue()
        self._tasks: Set[asyncio.Task] = set()
        self._listeners: List[StateListener] = []

    @property
    def state(self) -> ConverterState:
        return self._state

    def subscribe(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def dispatch(self, event: ConverterEvent) -> None:
        self._queue.put_nowait(event)

    def stop(self) -> None:
        self._queue.put_nowait(_STOP)

    async def run(self) -> None:
        """Apply events until ``stop`` is called."""
        while True:
            event = await self._queue.get()
            if event is _STOP:
                break
            self._apply(event)

    async def run_until_idle(self) -> ConverterState:
        """Apply queued events until nothing is queued and no request is in flight."""
        while True:
            while not self._queue.empty():
                event = self._queue.get_nowait()
                if event is not _STOP:
                    self._apply(event)
            pending = {task for task in self._tasks if not task.done()}
            if not pending and self._queue.empty():
                return self._state
            if pending:
                await asyncio.wait(pending)
            else:
                await asyncio.sleep(0)

    async def aclose(self) -> None:
        """Wait for outstanding requests so no task outlives the loop."""
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    def _apply(self, event: object) -> None:
        self._state, effect = transition(self._state, event)
        self._notify(event)
        if effect is not None:
            self._spawn(effect)

    def _notify(self, event: object) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._state, event)
            except Exception as e:  # noqa: BLE001
                logger.error(f"State listener failed: {e}", exc_info=True)

    def _spawn(self, effect: RequestConversion) -> None:
        task = asyncio.create_task(self._perform(effect))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _perform(self, effect: RequestConversion) -> None:
        request = effect.request
        logger.info(
            f"Requesting conversion {request.amount} {request.from_code} -> {request.to_code}",
            extra={"correlation_id": effect.correlation_id},
        )
        try:
            result = await self.client.execute(request)
        except Exception as e:  # noqa: BLE001
            # Clients report failures as data; anything escaping is still a failed transport
            logger.error(f"Exchange client raised: {e}", extra={"correlation_id": effect.correlation_id})
            result = Failed(reason=FailureReason.TRANSPORT_FAILURE, detail=str(e))
        self.dispatch(ReceiveResult(result=result, correlation_id=effect.correlation_id))
