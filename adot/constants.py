# -*- coding: utf-8 -*-

"""
存储项目共享的常量。
"""

import os
from enum import Enum


class Command(str, Enum):
    """The closed set of commands the dispatcher knows about."""
    MICROBLOG = "microblog"
    LOCATION = "location"
    README = "readme"


# --- Environment variables ---
ENV_CREDENTIALS = "GOOGLE_APPLICATION_CREDENTIALS"
ENV_PROJECT_ID = "PROJECT_ID"
ENV_IPINFO_TOKEN = "IPINFO_TOKEN"
ENV_ADOT_HOME = "ADOT_HOME"

DEFAULT_ADOT_HOME = os.path.join(os.path.expanduser("~"), ".adot")

# Every command must appear here, even when it needs nothing
REQUIRED_SETTINGS = {
    Command.MICROBLOG: (ENV_CREDENTIALS, ENV_PROJECT_ID),
    Command.LOCATION: (ENV_CREDENTIALS, ENV_PROJECT_ID, ENV_IPINFO_TOKEN),
    Command.README: (),
}

# --- Firestore layout ---
MICROBLOG_COLLECTION = "microblog"
LOCATION_COLLECTION = "location"
LOCATION_DOCUMENT_ID = "latest"

# --- Readme footer ---
PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
ASSETS_DIR = os.path.join(PACKAGE_DIR, "assets")
FOOTER_ASSETS = ("adot-logo.png", "adot-signature.png")
README_FILENAME = "README.md"

FOOTER_BLOCK = (
    "\n"
    "---\n"
    "\n"
    "<p align=\"center\">\n"
    "  <img src=\"adot-logo.png\" alt=\"adot\" height=\"32\">\n"
    "  <img src=\"adot-signature.png\" alt=\"signature\" height=\"32\">\n"
    "</p>\n"
    "\n"
    "<p align=\"center\"><sub>Written by Akshith Garapati · posted with adot</sub></p>\n"
)
