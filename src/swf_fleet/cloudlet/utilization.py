"""Utilization models of the resources used by a cloudlet."""


class UtilizationModel(object):
    """
    Fraction of a VM resource a cloudlet uses, constant over time.

    Args:
        object (object): This is the parent object class
    """

    def __init__(self, fraction: float):
        """
        Initialise the instance of the UtilizationModel class.

        Args:
            fraction (float): Fraction of the resource used, in [0, 1].

        Raises:
            ValueError: If the fraction is outside of [0, 1].
        """
        if not 0 <= fraction <= 1:
            raise ValueError("The utilization fraction must be between 0 and"
                             f" 1, got {fraction}")
        self.fraction = fraction

    def get_utilization(self, time: float = 0) -> float:
        return self.fraction

    def __repr__(self):
        return f"UtilizationModel({self.fraction})"
