from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/get-posts", methods=["GET"], endpoint="get_posts")
    def get_posts():
        try:
            posts = container.post_service.list_posts()
        except Exception as e:
            logger.exception("Error retrieving posts")
            return f"Error retrieving posts: {e}", 500

        if not posts:
            return "No posts found.", 200
        return jsonify([{"title": p.title, "description": p.description, "timestamp": p.timestamp} for p in posts]), 200
