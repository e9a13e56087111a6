"""Background fare worker.

Runs fare calculations off the caller's thread so rapid input changes in
a UI never block rendering. Requests and responses are plain dictionaries:

    request:  {"id": "...", "params": {...trip fields...}}
    response: {"id": "...", "result": {...breakdown...}}
              {"id": "...", "error": "message"}

A synchronous calculate_fare() call is equally valid; the worker adds no
pricing behavior of its own.
"""

import uuid
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Dict, Mapping, Optional

from cabfare.core.calculator import FareCalculator
from cabfare.config.settings import Settings
from cabfare.config.logging_config import get_logger
from cabfare.models.schema import RateCatalog
from cabfare.models.trip_models import FareBreakdown

logger = get_logger(__name__)


class FareWorkerError(Exception):
    """Raised when the worker answers a request with an error."""

    def __init__(self, request_id: str, message: str):
        super().__init__(message)
        self.request_id = request_id


class FareWorker:
    """Single-thread worker answering fare calculation requests.

    Example:
        >>> with FareWorker() as worker:
        ...     breakdown = worker.calculate({"mode": "drop", "vehicle_id": "sedan",
        ...                                   "start_km": 0, "end_km": 150}).result()
    """

    def __init__(
        self,
        catalog: Optional[RateCatalog] = None,
        settings: Optional[Settings] = None
    ):
        self.calculator = FareCalculator(catalog, settings)
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="fare-worker")

    def handle_message(self, message: Mapping[str, Any]) -> Dict[str, Any]:
        """Answer one request message.

        Args:
            message: Request with 'id' and 'params'

        Returns:
            Response echoing the id with either 'result' or 'error'
        """
        request_id = message.get("id")
        try:
            breakdown = self.calculator.calculate(message["params"])
        except Exception as e:
            logger.error(f"Fare request {request_id} failed: {e}")
            return {"id": request_id, "error": str(e)}
        return {"id": request_id, "result": breakdown.model_dump(mode="json")}

    def post(self, params: Mapping[str, Any], request_id: Optional[str] = None) -> "Future[Dict[str, Any]]":
        """Queue a request and return a future for its response message."""
        message = {"id": request_id or uuid.uuid4().hex[:8], "params": dict(params)}
        return self._executor.submit(self.handle_message, message)

    def calculate(self, params: Mapping[str, Any]) -> "Future[FareBreakdown]":
        """Queue a calculation and return a future for the breakdown.

        The future raises FareWorkerError if the worker answered with an
        error.
        """
        outcome: "Future[FareBreakdown]" = Future()

        def resolve(response_future: "Future[Dict[str, Any]]") -> None:
            response = response_future.result()
            if "error" in response:
                outcome.set_exception(FareWorkerError(response["id"], response["error"]))
            else:
                outcome.set_result(FareBreakdown.model_validate(response["result"]))

        self.post(params).add_done_callback(resolve)
        return outcome

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "FareWorker":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()


_worker: Optional[FareWorker] = None


def get_worker() -> FareWorker:
    """Get the shared worker, creating it on first use."""
    global _worker
    if _worker is None:
        _worker = FareWorker()
    return _worker


def calculate_fare_async(params: Mapping[str, Any]) -> "Future[FareBreakdown]":
    """Calculate a fare on the shared background worker."""
    return get_worker().calculate(params)
