# -*- coding: utf-8 -*-
from typing import Sequence


def array_equals(left: Sequence, right: Sequence) -> bool:
    """逐项、按顺序比较两个序列。"""
    if len(left) != len(right):
        return False
    return all(a == b for a, b in zip(left, right))
