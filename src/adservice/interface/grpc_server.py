"""gRPC transport for GetAds.

Registers ``hipstershop.AdService`` with two methods through a generic
handler: ``GetAds`` (unary) and ``StreamAds`` (bidirectional stream, one
response per request). Message bodies are the JSON form of the pydantic
models; ``null`` or an empty body is an absent request.
"""

from __future__ import annotations

import time
import uuid
from collections.abc import Iterable, Iterator
from concurrent import futures

import grpc
from pydantic import ValidationError

from ..config.runtime import RuntimeSettings, get_settings
from ..domain.errors import InvalidRequestError
from ..models.requests import AdRequest
from ..models.responses import AdResponse
from ..services.ad_service import AdService
from .observability import get_logger, log_call

SERVICE_NAME = "hipstershop.AdService"
GET_ADS_METHOD = f"/{SERVICE_NAME}/GetAds"
STREAM_ADS_METHOD = f"/{SERVICE_NAME}/StreamAds"

_ABSENT_BODIES = frozenset({b"", b"null"})


# ---------------------------------------------------------------------------
# Wire codec
# ---------------------------------------------------------------------------


def encode_request(request: AdRequest | None) -> bytes:
    if request is None:
        return b"null"
    return request.model_dump_json().encode("utf-8")


def decode_request(data: bytes) -> AdRequest | None:
    """Decode a request body. Raises ValidationError on malformed JSON."""
    if data.strip() in _ABSENT_BODIES:
        return None
    return AdRequest.model_validate_json(data)


def encode_response(response: AdResponse) -> bytes:
    return response.model_dump_json().encode("utf-8")


def decode_response(data: bytes) -> AdResponse:
    return AdResponse.model_validate_json(data)


# ---------------------------------------------------------------------------
# Servicer
# ---------------------------------------------------------------------------


class AdServiceServicer:
    """Translate RPCs into AdService calls and errors into status codes."""

    def __init__(self, service: AdService) -> None:
        self._service = service

    def GetAds(self, request: bytes, context: grpc.ServicerContext) -> AdResponse:
        return self._handle("GetAds", request, context)

    def StreamAds(
        self, request_iterator: Iterable[bytes], context: grpc.ServicerContext
    ) -> Iterator[AdResponse]:
        for request in request_iterator:
            yield self._handle("StreamAds", request, context)

    def _handle(self, rpc: str, body: bytes, context: grpc.ServicerContext) -> AdResponse:
        t0 = time.monotonic()
        trace_id = str(uuid.uuid4())
        try:
            request = decode_request(body)
            response = self._service.get_ads(request)
        except ValidationError as e:
            log_call(rpc, trace_id, (time.monotonic() - t0) * 1000, error="malformed_request")
            context.abort(grpc.StatusCode.INVALID_ARGUMENT, f"malformed request: {e.error_count()} error(s)")
        except InvalidRequestError as e:
            log_call(rpc, trace_id, (time.monotonic() - t0) * 1000, error="invalid_request")
            context.abort(grpc.StatusCode.INVALID_ARGUMENT, str(e))
        log_call(
            rpc,
            trace_id,
            (time.monotonic() - t0) * 1000,
            extra={"ads_count": len(response.ads)},
        )
        return response


def build_handler(service: AdService) -> grpc.GenericRpcHandler:
    servicer = AdServiceServicer(service)
    return grpc.method_handlers_generic_handler(
        SERVICE_NAME,
        {
            "GetAds": grpc.unary_unary_rpc_method_handler(
                servicer.GetAds,
                request_deserializer=None,
                response_serializer=encode_response,
            ),
            "StreamAds": grpc.stream_stream_rpc_method_handler(
                servicer.StreamAds,
                request_deserializer=None,
                response_serializer=encode_response,
            ),
        },
    )


def create_grpc_server(
    service: AdService,
    settings: RuntimeSettings | None = None,
    host: str = "[::]",
) -> tuple[grpc.Server, int]:
    """Build (but do not start) a server. Returns the server and its bound port."""
    settings = settings or get_settings()
    server = grpc.server(futures.ThreadPoolExecutor(max_workers=settings.max_workers))
    server.add_generic_rpc_handlers((build_handler(service),))
    port = server.add_insecure_port(f"{host}:{settings.port}")
    return server, port


def serve(service: AdService, settings: RuntimeSettings | None = None) -> None:
    """Start the gRPC server and block until it terminates."""
    logger = get_logger()
    server, port = create_grpc_server(service, settings)
    server.start()
    logger.info("server_started", extra={"port": port, "service": SERVICE_NAME})
    try:
        server.wait_for_termination()
    except KeyboardInterrupt:
        logger.info("server_stopping")
        server.stop(grace=None)


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------


class AdServiceClient:
    """Minimal client for the JSON-encoded AdService."""

    def __init__(self, channel: grpc.Channel) -> None:
        self._get_ads = channel.unary_unary(
            GET_ADS_METHOD,
            request_serializer=encode_request,
            response_deserializer=decode_response,
        )
        self._stream_ads = channel.stream_stream(
            STREAM_ADS_METHOD,
            request_serializer=encode_request,
            response_deserializer=decode_response,
        )

    def get_ads(self, request: AdRequest | None, timeout: float | None = None) -> AdResponse:
        return self._get_ads(request, timeout=timeout)

    def stream_ads(
        self, requests: Iterable[AdRequest | None], timeout: float | None = None
    ) -> Iterator[AdResponse]:
        return self._stream_ads(iter(requests), timeout=timeout)
