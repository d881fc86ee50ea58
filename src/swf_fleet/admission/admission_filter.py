"""
Decide if the cloudlets created so far are accepted.

The predicate only shapes the value returned to the caller of the reader, it \
never stops a fleet from being provisioned.
"""
from typing import Callable, Iterable

from swf_fleet.cloudlet.cloudlet import Cloudlet

CloudletPredicate = Callable[[Cloudlet], bool]


def accept_all(cloudlet: Cloudlet) -> bool:
    """Accept every cloudlet."""
    return True


def any_accepted(cloudlet_queue: Iterable[Cloudlet],
                 predicate: CloudletPredicate = accept_all) -> bool:
    """
    Scan the queue until a cloudlet satisfies the predicate.

    Args:
        cloudlet_queue (Iterable[Cloudlet]): The shared cloudlet queue.
        predicate (CloudletPredicate, optional): Test applied to each \
        cloudlet. Defaults to accept_all.

    Returns:
        bool: True as soon as one cloudlet is accepted, False if none is or \
        the queue is empty.
    """
    for cloudlet in cloudlet_queue:
        if predicate(cloudlet):
            return True
    return False
