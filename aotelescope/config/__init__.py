from .TelescopeParameters import TelescopeParameters, read_telescope_yaml
from .yaml_loader import load_from_str
