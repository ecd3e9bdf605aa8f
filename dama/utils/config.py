# Imports
from typing import Dict, Any, Optional
import yaml

from .logging import error


# Values used when a key is absent from the YAML file
DEFAULT_CONFIG: Dict[str, Any] = {
    "unicode_pieces": True,
    "show_legal_moves": False,
    "max_plies": 200,
    "verbose": False,
}


class DamaConfig:
    """
    Configuration class for the dama console host that loads from a YAML file and provides
    property-based access to configuration values, falling back to DEFAULT_CONFIG.
    """

    def __init__(self, config_dict: Optional[Dict[str, Any]] = None):
        """
        Initialize the configuration with a dictionary.

        Args:
            config_dict (dict, optional): Dictionary containing configuration values.
                                         Missing keys take their default value.
        """
        config = dict(DEFAULT_CONFIG)
        config.update(config_dict or {})
        self._config = config
    # end def __init__

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the configuration to a dictionary.
        """
        return dict(self._config)
    # end def to_dict

    @classmethod
    def from_yaml(cls, config_path: str) -> "DamaConfig":
        """
        Load configuration from a YAML file.

        Args:
            config_path (str): Path to the YAML configuration file

        Returns:
            DamaConfig: Configuration object
        """
        try:
            with open(config_path, 'r') as f:
                config_dict = yaml.safe_load(f)
            # end with
        except FileNotFoundError:
            error(f"Configuration file {config_path} not found. Using default configuration.")
            return cls({})
        except yaml.YAMLError as e:
            error(f"Error parsing YAML configuration file: {e}")
            return cls({})
        # end try

        if config_dict is None:
            return cls({})
        # end if

        if not isinstance(config_dict, dict):
            error(f"Configuration file {config_path} must contain a mapping. Using default configuration.")
            return cls({})
        # end if

        return cls(config_dict)
    # end def from_yaml

    def __getattr__(self, name):
        """
        Get a configuration value by attribute name.

        Args:
            name (str): Name of the configuration property

        Returns:
            Any: Value of the configuration property

        Raises:
            AttributeError: If the property doesn't exist in the configuration
        """
        config = self.__dict__.get('_config', {})
        if name in config:
            return config[name]
        raise AttributeError(
            f"'{self.__class__.__name__}' object has no attribute "
            f"'{name}' (available attributes: {list(config.keys())})"
        )

    def __getitem__(self, key):
        if key in self._config:
            return self._config[key]
        # end if
        raise KeyError(key)

    def __setattr__(self, name, value):
        """
        Set a configuration value by attribute name.

        Args:
            name (str): Name of the configuration property
            value (Any): Value to set
        """
        if name == '_config':
            super().__setattr__(name, value)
        else:
            self._config[name] = value

    def get(self, name, default=None):
        """
        Get a configuration value with a default fallback.

        Args:
            name (str): Name of the configuration property
            default (Any, optional): Default value if property doesn't exist

        Returns:
            Any: Value of the configuration property or default
        """
        return self._config.get(name, default)

    def __contains__(self, name):
        return name in self._config
    # end def __contains__

# end class DamaConfig
