import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    LOG_FORMAT = data.get(
        "LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Invoice defaults for new drafts
    INVOICE_NUMBER_PREFIX = data.get("INVOICE_NUMBER_PREFIX", "INV")
    DEFAULT_INVOICE_STATUS = data.get("DEFAULT_INVOICE_STATUS", "pending")
    DEFAULT_INVOICE_TYPE = data.get("DEFAULT_INVOICE_TYPE", "project")

    # Display labels used by plot options and payment breakdowns
    AREA_UNIT = data.get("AREA_UNIT", "cents")
    CURRENCY_LABEL = data.get("CURRENCY_LABEL", "Rs.")
