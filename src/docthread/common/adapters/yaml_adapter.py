from typing import Any

import yaml

from docthread.common.interfaces import DocumentAdapter


class MultilineDumper(yaml.SafeDumper):
    pass


def _str_presenter(dumper, data):
    # Section texts keep their line breaks as literal blocks
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)


MultilineDumper.add_representer(str, _str_presenter)


class YamlAdapter(DocumentAdapter):
    def dump(self, data: Any) -> str:
        return yaml.dump(
            data,
            Dumper=MultilineDumper,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
