"""confpatterns - Root Package.

A classroom walkthrough of three object-oriented design patterns:

Key Components:
    - config: process-wide ConfigurationManager singleton, application config
    - domain: settings store, report builders, order prototypes
    - infrastructure: settings file persistence and structured logging
    - cli: command line entry point and the pattern walkthrough

Usage:
    >>> from confpatterns.config.manager import ConfigurationManager
    >>> config = ConfigurationManager.get_instance()
    >>> config.set_setting("username", "user1")
    >>> config.get_setting("username")
    'user1'
"""

from ._package import PACKAGE_NAME, __version__

__package_name__ = PACKAGE_NAME
