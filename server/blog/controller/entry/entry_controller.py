"""
Entry Controller - REST API for blog entries
============================================

Routes (all under /api, bearer token required):
- POST   /entries              Create an entry
- PUT    /entries              Update an entry (creates it when no id is given)
- GET    /entries              Current user's entries, paginated, newest first
- GET    /entries/<id>         One entry with its blog and tags
- DELETE /entries/<id>         Delete an entry
- GET    /_search/entries      Query-string search, paginated

Store and index failures are not handled here; they reach the global error
handler and are answered with a 500.
"""

import logging
from flask import request, jsonify, current_app

from ...service.entry_service import EntryService
from ...middleware import JWT_required, get_json_or_error, parse_body
from ...model.entry_request import EntryRequest
from ...core.di_container import DIContainer
from ...utils.pagination import (
    PageRequest,
    generate_pagination_headers,
    generate_search_pagination_headers,
)
from ...utils.response_helpers import (
    build_error_response,
    create_entity_creation_alert,
    create_entity_deletion_alert,
    create_entity_update_alert,
    create_failure_alert,
)
from ...utils.security_utils import get_current_user_login

logger = logging.getLogger(__name__)

ENTITY_NAME = "entry"


class EntryController:

    def __init__(self, entry_service: EntryService, blueprint):
        self.entry_service = entry_service
        self.blueprint = blueprint
        self._register_routes()

    def _register_routes(self):
        """Register all routes with the blueprint."""
        bp = self.blueprint
        bp.add_url_rule("/entries", "create_entry", JWT_required(self.create_entry), methods=["POST"])
        bp.add_url_rule("/entries", "update_entry", JWT_required(self.update_entry), methods=["PUT"])
        bp.add_url_rule("/entries", "get_all_entries", JWT_required(self.get_all_entries), methods=["GET"])
        bp.add_url_rule("/entries/<int:entry_id>", "get_entry", JWT_required(self.get_entry), methods=["GET"])
        bp.add_url_rule("/entries/<int:entry_id>", "delete_entry", JWT_required(self.delete_entry), methods=["DELETE"])
        bp.add_url_rule("/_search/entries", "search_entries", JWT_required(self.search_entries), methods=["GET"])

    def _page_request(self):
        return PageRequest.from_args(
            request.args,
            default_size=current_app.config.get("PAGINATION_DEFAULT_SIZE", 20),
            max_size=current_app.config.get("PAGINATION_MAX_SIZE", 2000),
        )

    def _create(self, data):
        if data.get("id") is not None:
            message = "A new entry cannot already have an ID"
            return build_error_response(
                message,
                "idexists",
                400,
                headers=create_failure_alert(ENTITY_NAME, "idexists", message)
            )

        entry_request = parse_body(EntryRequest, data)
        result = self.entry_service.save(entry_request.to_entity_data())

        headers = create_entity_creation_alert(ENTITY_NAME, result["id"])
        headers["Location"] = f"/api/entries/{result['id']}"
        return jsonify(result), 201, headers

    def create_entry(self):
        """
        POST /api/entries

        Body:
        {
            "title": "Hello",
            "content": "First post",
            "date": "2026-01-01T10:00:00Z",
            "blog": {"id": 1},
            "tags": [{"id": 2}]
        }

        201 with the stored entry and a Location header, or 400 when the body
        already carries an id.
        """
        data, error = get_json_or_error()
        if error:
            return error
        logger.debug(f"[ENTRY] REST request to save Entry : {data}")
        return self._create(data)

    def update_entry(self):
        """
        PUT /api/entries

        Full replacement of the entry identified by the body's id. Without an
        id the request is handled exactly like a POST.
        """
        data, error = get_json_or_error()
        if error:
            return error
        logger.debug(f"[ENTRY] REST request to update Entry : {data}")
        if data.get("id") is None:
            return self._create(data)

        entry_request = parse_body(EntryRequest, data)
        result = self.entry_service.save(entry_request.to_entity_data())
        return jsonify(result), 200, create_entity_update_alert(ENTITY_NAME, result["id"])

    def get_all_entries(self):
        """
        GET /api/entries?page=0&size=20&sort=title,asc

        Entries of the authenticated user's blogs, newest first, with
        X-Total-Count and Link headers.
        """
        logger.debug("[ENTRY] REST request to get a page of Entries")
        page = self.entry_service.find_page_for_login(get_current_user_login(), self._page_request())
        headers = generate_pagination_headers(page, "/api/entries")
        return jsonify(page.content), 200, headers

    def get_entry(self, entry_id):
        """GET /api/entries/<id>: 200 with the entry or 404 with an empty body."""
        logger.debug(f"[ENTRY] REST request to get Entry : {entry_id}")
        entry = self.entry_service.find_one(entry_id)
        if entry is None:
            return "", 404
        return jsonify(entry), 200

    def delete_entry(self, entry_id):
        """DELETE /api/entries/<id>: always 200, whether or not the entry existed."""
        logger.debug(f"[ENTRY] REST request to delete Entry : {entry_id}")
        self.entry_service.delete(entry_id)
        return "", 200, create_entity_deletion_alert(ENTITY_NAME, entry_id)

    def search_entries(self):
        """
        GET /api/_search/entries?query=title:flask&page=0&size=20

        The query uses Lucene query-string syntax. Link headers repeat the query.
        """
        query = request.args.get("query")
        if query is None:
            return build_error_response("Query parameter 'query' is required", "MISSING_QUERY", 400)

        logger.debug(f"[ENTRY] REST request to search for a page of Entries for query {query}")
        page = self.entry_service.search(query, self._page_request())
        headers = generate_search_pagination_headers(query, page, "/api/_search/entries")
        return jsonify(page.content), 200, headers


# Initialize controller with DI
def init_entry_controller(blueprint):
    """Initialize Entry controller with dependency injection."""
    container = DIContainer.get_instance()
    entry_service = container.resolve(EntryService.__name__)
    return EntryController(entry_service, blueprint)
