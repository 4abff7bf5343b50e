# -*- coding: utf-8 -*-

"""
Readme footer: copies the bundled images next to README.md and appends the
footer block. Running it twice appends the block twice.
"""

import os
import shutil
import logging
from typing import List

from ..constants import ASSETS_DIR, FOOTER_ASSETS, FOOTER_BLOCK, README_FILENAME
from ..errors import FileIOError


def locate_assets(assets_dir: str = ASSETS_DIR) -> List[str]:
    """Returns the absolute paths of the footer images, in FOOTER_ASSETS order."""
    paths = []
    for name in FOOTER_ASSETS:
        path = os.path.join(assets_dir, name)
        if not os.path.isfile(path):
            raise FileIOError(f"bundled asset not found: {path}")
        paths.append(path)
    return paths


def write_footer(logger: logging.Logger, target_dir: str, assets_dir: str = ASSETS_DIR) -> str:
    """复制页脚图片并将页脚追加到 target_dir/README.md

    Returns:
        Path of the README that was written.

    Raises:
        FileIOError: assets missing, or target_dir missing / not writable.
    """
    if not os.path.isdir(target_dir):
        raise FileIOError(f"target directory does not exist: {target_dir}")

    assets = locate_assets(assets_dir)
    readme_path = os.path.join(target_dir, README_FILENAME)

    try:
        for src in assets:
            dest = os.path.join(target_dir, os.path.basename(src))
            shutil.copyfile(src, dest)
            logger.debug(f"Copied {src} -> {dest}")

        existed = os.path.exists(readme_path)
        with open(readme_path, 'a', encoding='utf-8') as f:
            f.write(FOOTER_BLOCK)
    except OSError as e:
        raise FileIOError(f"cannot write footer into {target_dir}: {e}")

    logger.info(f"Footer {'appended to' if existed else 'written to new'} {readme_path}")
    return readme_path


def handle_readme(logger: logging.Logger, target_dir: str) -> str:
    """处理 'readme' 命令。"""
    readme_path = write_footer(logger, target_dir)
    print(f"Footer added to {readme_path}")
    return readme_path
