import io
import os
import logging
from pydantic import BaseModel, Field, PrivateAttr
from ruamel.yaml import YAML
from dotenv import load_dotenv
from .protocol.report import DeliveryReport

logger = logging.getLogger(__name__)


CONFIG_PATH_ENV_VAR = "XMS_SERIALIZER_CONFIG"
DEFAULT_CONFIG_PATH = "xms_serializer.yaml"


class SerializerConfig(BaseModel):
    """Settings for turning request objects into JSON text.
    
    `delivery_reports` is the set of delivery report wire values the remote API is known to accept. Values outside of it are rejected when serializing instead of being passed through.
    """
    
    indent: int | None = None
    delivery_reports: list[str] = Field(
        default_factory=lambda: [report.value for report in DeliveryReport])
    
    _file_path: str = PrivateAttr(default=DEFAULT_CONFIG_PATH)
    
    @classmethod
    def load_from_yaml(
        cls,
        file_path: str = DEFAULT_CONFIG_PATH,
        generate_missing: bool = True
    ) -> "SerializerConfig":
        yaml = YAML()
        
        try:
            with open(file_path, "r") as f:
                file_content = f.read()
            config_data = yaml.load(file_content)
            config = cls.model_validate(config_data or {})
            logger.info(f"Loaded serializer config from {file_path!r}")
            
        except FileNotFoundError:
            logger.debug(f"No config at {file_path!r}, using defaults")
            config = cls()
        
        config._file_path = file_path
        
        if generate_missing:
            config.save_to_yaml()
            
        return config
    
    @classmethod
    def load_from_env(cls, variable: str = CONFIG_PATH_ENV_VAR) -> "SerializerConfig":
        """Loads config from the YAML file named by an environment variable (`.env` files are read too).
        
        Falls back to defaults if the variable isn't set.
        """
        load_dotenv()
        file_path = os.getenv(variable)
        if file_path is None:
            logger.debug(f"{variable} not set, using default serializer config")
            return cls()
        return cls.load_from_yaml(file_path, generate_missing=False)
    
    def save_to_yaml(self):
        """Writes config to its YAML file, the file is only opened once the YAML has been rendered."""
        yaml = YAML()
        buffer = io.StringIO()
        yaml.dump(self.model_dump(mode="json"), buffer)
        
        with open(self._file_path, "w") as f:
            f.write(buffer.getvalue())
        
        logger.debug(f"Saved serializer config to {self._file_path!r}")
