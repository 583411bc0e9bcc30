#!/usr/bin/env python3
"""
possible outcomes of a fan speed measurement

 - Measured:  the tach reading is trustworthy, 'rpm' holds the fan speed
 - Stopped:   the tach reading is too low but the fan was told to stop
 - Undefined: the tach reading is too low and the fan should be spinning
"""

from attrs import frozen


@frozen
class Measured:
    rpm: int


@frozen
class Stopped:
    pass


@frozen
class Undefined:
    pass


RpmResult = Measured | Stopped | Undefined
