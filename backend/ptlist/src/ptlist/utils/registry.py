from ptlist.utils.utils import generatorsRegister
from ptlist.models.timestamp_models import PeriodUnit

def register_generator(unit: PeriodUnit):
    return generatorsRegister.register(unit)


def register_generators(*units: PeriodUnit):
    return generatorsRegister.multi_register(units)
