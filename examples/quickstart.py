"""Quickstart example for parsnip.

Builds a tiny integer-list parser out of elementary steps, composing them
only with succeed, fail, on_success and on_failure.

Note: Grammar-level combinators (sequence, repetition, alternation) are
written inline here for illustration; parsnip itself only provides the
outcome model they are built on.
"""

from parsnip import (
    Cursor,
    DiagnosticFormatter,
    Observation,
    ObservationTemplate,
    Outcome,
    OutputFormat,
    Severity,
    fail,
    on_failure,
    on_success,
    succeed,
)


def char(expected: str, cursor: Cursor) -> Outcome[str]:
    label = f"'{expected}'"
    if cursor.is_eof:
        return fail(cursor, [ObservationTemplate.unexpected_eof([label])])
    if cursor.current != expected:
        return fail(cursor, [ObservationTemplate.unexpected_character(cursor.current, [label])])
    return succeed(expected, cursor.advance())


def integer(cursor: Cursor) -> Outcome[int]:
    end = cursor
    while not end.is_eof and end.current.isdigit():
        end = end.advance()
    if end.pos == cursor.pos:
        return fail(cursor, [ObservationTemplate.expected("digit")])
    return succeed(int(cursor.slice_to(end.pos)), end)


def more_items(items: list[int], cursor: Cursor) -> Outcome[list[int]]:
    # ',' integer more_items | ']'
    after_comma = on_success(
        char(",", cursor),
        lambda comma: on_success(
            integer(comma.remainder),
            lambda item: more_items([*items, item.value], item.remainder),
        ),
    )
    return on_failure(
        after_comma,
        lambda failed: failed
        if failed.remainder.pos > cursor.pos
        else on_success(char("]", cursor), lambda close: succeed(items, close.remainder)),
    )


def integer_list(source: str) -> Outcome[list[int]]:
    opened = char("[", Cursor(source, 0))
    return on_success(
        opened,
        lambda bracket: on_success(
            integer(bracket.remainder),
            lambda first: more_items([first.value], first.remainder),
        ),
    )


# Example 1: Successful parse
print("=" * 50)
print("Example 1: Successful Parse")
print("=" * 50)

outcome = integer_list("[1,22,333]")
print(outcome)
# Output: Successfully parsed value: [1, 22, 333]. Errors: (followed by an empty line)

# Example 2: Failure with the fixed diagnostic window
print("\n" + "=" * 50)
print("Example 2: Failure Diagnostics")
print("=" * 50)

outcome = integer_list("[10,20,30,40,x]")
print(outcome)
# Output:
# Parsing failure. Recently consumed: ',20,30,40,'. Errors:
# Expected digit
print(f"has_value={outcome.has_value}, failed at position {outcome.remainder.pos}")

# Example 3: Configurable formatting for tooling
print("\n" + "=" * 50)
print("Example 3: Diagnostic Formatter")
print("=" * 50)

for output_format in OutputFormat:
    formatter = DiagnosticFormatter(output_format=output_format)
    print(f"[{output_format}]")
    print(formatter.format_outcome(outcome))

# Example 4: Positioned observations survive detachment
print("\n" + "=" * 50)
print("Example 4: Positioned Observations")
print("=" * 50)

detached = [o.located(outcome.remainder.pos) for o in outcome.observations]
detached.append(Observation.at("List opened here", 0, severity=Severity.INFO))
print(DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format_all(
    detached, source=outcome.remainder.source
))

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
