from storefront.domain.exceptions import LayoutError


class InvariantViolation(LayoutError):
    pass
