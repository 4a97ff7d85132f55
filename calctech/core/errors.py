class CalculatorInputError(ValueError):
    """Inputs parsed but describe something the calculator cannot compute.

    The message is shown to the user as-is.
    """
