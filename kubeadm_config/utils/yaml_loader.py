from ruamel.yaml import YAML


def get_yaml_instance(typ: str = "rt") -> YAML:
    yaml = YAML(typ=typ)
    yaml.default_flow_style = False
    yaml.explicit_start = False
    if typ == "rt":
        yaml.preserve_quotes = True
        yaml.width = 4096
        yaml.indent(mapping=2, sequence=2, offset=0)
    return yaml
