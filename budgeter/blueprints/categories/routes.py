from flask import Blueprint, jsonify, request
from ...extensions import db
from ...services import CategoryDirectory

categories_bp = Blueprint("categories", __name__, url_prefix="/api/categories")


@categories_bp.route("", methods=["GET"])
def list_categories():
    return jsonify(CategoryDirectory(db.session).list_all())


@categories_bp.route("", methods=["POST"])
def create_category():
    data = request.get_json(silent=True) or request.form.to_dict()
    return jsonify(CategoryDirectory(db.session).create(data)), 201


@categories_bp.route("/<int:category_id>", methods=["PUT"])
def update_category(category_id):
    data = request.get_json(silent=True) or request.form.to_dict()
    return jsonify(CategoryDirectory(db.session).update(category_id, data))


@categories_bp.route("/<int:category_id>", methods=["DELETE"])
def delete_category(category_id):
    CategoryDirectory(db.session).delete(category_id)
    return "", 204
