"""Flask application factory."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from flask import Flask, jsonify

from storefront.application.create_product import CreateProductHandler
from storefront.application.product_service import ProductService
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import (
    EntityNotFoundError,
    RepositoryError,
    ValidationError,
)
from storefront.domain.service.discount_policy import DiscountPolicyEvaluator
from storefront.infrastructure import bootstrap
from storefront.infrastructure.config import Settings
from storefront.infrastructure.http.product_routes import product_blueprint

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    *,
    service: ProductService | None = None,
    evaluator: DiscountPolicyEvaluator | None = None,
    clock: Callable[[], date] = date.today,
) -> Flask:
    """Build the API. Collaborators default to the ones wired in bootstrap."""
    if service is None or evaluator is None:
        settings = settings or Settings.from_env()
        service = service or bootstrap.product_service(settings)
        evaluator = evaluator or bootstrap.discount_policy(settings)

    app = Flask(__name__)
    app.json.sort_keys = False

    app.register_blueprint(
        product_blueprint(
            service,
            CreateProductHandler(service, evaluator, clock),
            UpdateProductHandler(service, evaluator, clock),
        )
    )
    _register_error_handlers(app)

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    return app


def _register_error_handlers(app: Flask) -> None:

    @app.errorhandler(ValidationError)
    def handle_validation_error(exc: ValidationError):
        logger.info("Rejected request: %s", exc)
        return jsonify({"error": str(exc)}), 400

    @app.errorhandler(EntityNotFoundError)
    def handle_not_found(exc: EntityNotFoundError):
        logger.info("%s", exc)
        return "", 404

    @app.errorhandler(RepositoryError)
    def handle_repository_error(exc: RepositoryError):
        return jsonify({"error": str(exc)}), 500
