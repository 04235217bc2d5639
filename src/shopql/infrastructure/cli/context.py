"""Hands command callbacks a ShopContext built from the group's data dir.

The root group only records the directory; stores are created on first
use so commands such as ``schema`` leave the filesystem alone.
"""

from __future__ import annotations

import functools

import click

from shopql.infrastructure.bootstrap import build_context


def pass_shop_context(f):
    @click.pass_context
    def new_func(ctx: click.Context, *args, **kwargs):
        return ctx.invoke(f, build_context(ctx.obj), *args, **kwargs)

    return functools.update_wrapper(new_func, f)
