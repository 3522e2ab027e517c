# engine/impact/exceptions.py

class ImpactError(Exception):
    pass


class InvalidInput(ImpactError, ValueError):
    pass
