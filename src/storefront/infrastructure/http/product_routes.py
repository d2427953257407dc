"""HTTP endpoints for the Product aggregate."""

from __future__ import annotations

import logging
from dataclasses import asdict

from flask import Blueprint, jsonify, request

from storefront.application.create_product import CreateProductHandler
from storefront.application.dto import ProductDTO, ProductInput
from storefront.application.product_service import ProductService
from storefront.application.update_product import UpdateProductHandler

logger = logging.getLogger(__name__)


def product_blueprint(
    service: ProductService,
    create_handler: CreateProductHandler,
    update_handler: UpdateProductHandler,
) -> Blueprint:
    bp = Blueprint("products", __name__, url_prefix="/products")

    @bp.route("", methods=["GET"])
    def list_products():
        logger.info("GET - returning all products")
        products = service.list_products()
        return jsonify([asdict(ProductDTO.from_product(p)) for p in products])

    @bp.route("/<int:product_id>", methods=["GET"])
    def get_product(product_id: int):
        logger.info("GET - returning product #%s", product_id)
        product = service.get_product(product_id)
        if product is None:
            return "", 404
        return jsonify(asdict(ProductDTO.from_product(product)))

    @bp.route("", methods=["POST"])
    def create_product():
        logger.info("POST - creating product")
        data = ProductInput.from_payload(request.get_json(silent=True))
        dto = create_handler.handle(data)
        return jsonify(asdict(dto)), 201

    @bp.route("/<int:product_id>", methods=["PUT"])
    def update_product(product_id: int):
        logger.info("PUT - updating product #%s", product_id)
        data = ProductInput.from_payload(request.get_json(silent=True))
        dto = update_handler.handle(product_id, data)
        return jsonify(asdict(dto))

    @bp.route("/<int:product_id>", methods=["DELETE"])
    def delete_product(product_id: int):
        logger.info("DELETE - deleting product #%s", product_id)
        service.delete_product(product_id)
        return "", 204

    return bp
