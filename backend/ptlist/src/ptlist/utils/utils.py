from ptlist.errors import PERIOD_ERROR, bad_request
from ptlist.models.timestamp_models import PeriodUnit


def singleton(class_):
    """
    Singleton decorator
    :param class_: class
    :return: class instance
    """
    instances = {}

    def get_instance(*args, **kwargs):
        if class_ not in instances:
            instances[class_] = class_(*args, **kwargs)
        return instances[class_]

    return get_instance


@singleton
class GeneratorRegister(object):
    def __init__(self):
        self._generators = dict()

    def register(self, unit: PeriodUnit):
        def _register(cls):
            self._generators[unit] = cls(unit=unit)
            return cls
        return _register

    def multi_register(self, units):
        def _decorator(cls):
            for _unit in units:
                self.register(unit=_unit)(cls)
            return cls
        return _decorator

    def get_generator(self, unit: PeriodUnit):
        try:
            return self._generators[unit]
        except KeyError:
            raise bad_request(PERIOD_ERROR) from None

    def units(self):
        return list(self._generators)


generatorsRegister = GeneratorRegister()
