# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

HIGHLIGHT_START = "\x1b[36m"
HIGHLIGHT_END = "\x1b[0;1m"


def format_message(message: str, *values: str) -> str:
    """
    Replace the positional placeholders of a message with the given values.

    format_message("Hello {0}", "World") returns "Hello World". Placeholders
    without a value are left untouched, braces in the values are not
    interpreted.
    """
    for index, value in enumerate(values):
        message = message.replace(f"{{{index}}}", value, 1)
    return message


def highlight_message(message: str, *values: str) -> str:
    """
    Wrap the first occurrence of each value in terminal highlight markers.
    """
    for value in values:
        if not value:
            continue
        message = message.replace(
            value, f"{HIGHLIGHT_START}{value}{HIGHLIGHT_END}", 1
        )
    return message


def strip_highlights(message: str) -> str:
    return message.replace(HIGHLIGHT_START, "").replace(HIGHLIGHT_END, "")
