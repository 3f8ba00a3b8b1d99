"""
GraphQLActionView: a Django view serving one GraphQL endpoint.

Usage:
    from graphql_action.views import GraphQLActionView

    urlpatterns = [
        path(
            "graphql/",
            GraphQLActionView.as_view(
                queries={"viewer": ViewerField, "user": "accounts.graphql.UserField"},
                mutations={"update_profile": UpdateProfileField},
            ),
            name="graphql",
        ),
    ]

Without ``queries``/``mutations`` the view reads them from the
``GRAPHQL_ACTION`` setting.
"""

import logging
from typing import Any, Mapping, Optional

from django.http import HttpRequest, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt
from graphql import GraphQLSchema

from .exceptions import MalformedRequestError
from .execution import execute_query, format_result
from .reporting import get_error_reporter
from .request import parse_request
from .schema import build_schema
from .settings import ActionSettings, get_action_settings
from .types.registry import TypeRegistry

logger = logging.getLogger(__name__)


@method_decorator(csrf_exempt, name="dispatch")
class GraphQLActionView(View):
    """Parse the request, build the schema, execute and return JSON."""

    http_method_names = ["get", "post", "options"]

    queries: Optional[Mapping[str, Any]] = None
    mutations: Optional[Mapping[str, Any]] = None
    registry: Optional[TypeRegistry] = None
    error_reporter: Any = None
    middleware: Optional[list] = None

    def get(self, request: HttpRequest, *args, **kwargs):
        return self.run(request)

    def post(self, request: HttpRequest, *args, **kwargs):
        return self.run(request)

    def run(self, request: HttpRequest) -> JsonResponse:
        action_settings = get_action_settings()
        try:
            query_request = parse_request(request)
        except MalformedRequestError as exc:
            logger.info("Rejected malformed GraphQL request: %s", exc.message)
            return self._malformed_request_response(exc)

        result = execute_query(
            self.get_schema(action_settings),
            query_request,
            root_value=self.get_root_value(request),
            context_value=self.get_context(request),
            middleware=self.middleware,
            reporter=self.get_error_reporter(action_settings),
        )
        payload = format_result(
            result,
            debug=action_settings.debug_enabled,
            include_debug_message=action_settings.include_debug_message,
            include_trace=action_settings.include_trace,
        )
        return JsonResponse(payload, status=200)

    def get_schema(self, action_settings: Optional[ActionSettings] = None) -> GraphQLSchema:
        action_settings = action_settings or get_action_settings()
        queries = self.queries if self.queries is not None else action_settings.queries
        mutations = self.mutations if self.mutations is not None else action_settings.mutations
        return build_schema(queries, mutations, registry=self.registry)

    def get_context(self, request: HttpRequest) -> Any:
        return request

    def get_root_value(self, request: HttpRequest) -> Any:
        return None

    def get_error_reporter(self, action_settings: Optional[ActionSettings] = None):
        if self.error_reporter is not None:
            return self.error_reporter
        return get_error_reporter(action_settings)

    def _malformed_request_response(self, exc: MalformedRequestError) -> JsonResponse:
        return JsonResponse(
            {"errors": [{"message": exc.message, "extensions": exc.extensions}]},
            status=400,
        )
