"""Package metadata and naming constants."""

PACKAGE_NAME = "confpatterns"
__version__ = "0.1.0"
DESCRIPTION = "Singleton, Builder and Prototype pattern walkthrough"
