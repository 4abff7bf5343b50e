# -*- coding: utf-8 -*-
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict

from ..constants import MICROBLOG_COLLECTION
from ..utils.config import Config
from ..utils.firestore_client import get_firestore_client, insert_document


def build_post(text: str) -> Dict[str, Any]:
    post_id = str(uuid.uuid4())
    return {
        "id": post_id,
        "text": text,
        "created_at": datetime.now(timezone.utc),
    }


def handle_microblog(logger: logging.Logger, config: Config, text: str) -> Dict[str, Any]:
    """处理 'microblog' 命令：在 microblog 集合中新建一条帖子。

    Raises:
        ConfigError: credentials or project id unusable.
        NetworkError: Firestore unreachable or the write was rejected.
    """
    client = get_firestore_client(logger, config)
    post = build_post(text)
    insert_document(logger, client, MICROBLOG_COLLECTION, post["id"], post)

    logger.info(f"Microblog post {post['id']} created at {post['created_at'].isoformat()}")
    print(f"Inserted microblog post {post['id']} ({post['created_at'].isoformat()}): {text}")
    return post
