import yaml


def load_from_str(yaml_str):
    """
    Loads a yaml string holding a single mapping into a dictionary.

    Only plain YAML is understood (yaml.SafeLoader): no python objects or
    custom tags.

    :param yaml_str: a yaml string
    :return a dictionary, empty for an empty document
    """
    result = yaml.load(yaml_str, Loader=yaml.SafeLoader)
    if result is None:
        return {}
    if not isinstance(result, dict):
        raise ValueError(f"Expected a YAML mapping at the top level. Found type {type(result).__name__}")
    return result
