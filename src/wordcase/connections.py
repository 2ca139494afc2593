from importlib import resources
from wordcase.helpers import cached_class_attr

class ConventionDataSource:
    @cached_class_attr
    def yaml_path(cls):
        """ Convention table shipped as package data """
        return resources.files('wordcase.data').joinpath('conventions.yaml')
