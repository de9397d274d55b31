from datetime import date
from typing import Callable
from uuid import uuid4

IdGenerator = Callable[[], str]

def short_id() -> str:
    '''Return a short random token (8 hex characters). Collisions are not checked.'''
    return uuid4().hex[:8]

def validate_stay(check_in: date, check_out: date):
    '''Validate that check_out does not precede check_in.'''
    if check_out < check_in:
        raise ValueError("check_out must not precede check_in")

def are_overlapping(start1: date, end1: date, start2: date, end2: date) -> bool:
    '''Check if two stays overlap. Boundaries are inclusive: a shared day counts.'''
    return not (end1 < start2) and not (start1 > end2)
