import os

DATABASE_URL = (os.getenv("DATABASE_URL") or "").replace("postgres://", "postgresql://", 1)
SQLALCHEMY_DATABASE_URI = DATABASE_URL
SQLALCHEMY_TRACK_MODIFICATIONS = False

SECRET_KEY = os.getenv("SECRET_KEY")

SITE_NAME = os.getenv("SITE_NAME", "Calc-Tech.com")

# "Today" for age, due date and conception calculators
SITE_TIME_ZONE = os.getenv("SITE_TIME_ZONE", "US/Eastern")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Set LOG_VISITS=false to stop writing visit rows (inputs are never stored either way)
LOG_VISITS = os.getenv("LOG_VISITS", "true").lower() in ("1", "true", "yes")

# Jinja2 whitespace control - prevents unwanted line breaks in rendered HTML
JINJA2_TRIM_BLOCKS = True
JINJA2_LSTRIP_BLOCKS = True
