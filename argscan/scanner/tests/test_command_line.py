from argscan.scanner.command_line import CommandLineArgs
from argscan.values import to_text

RESPONSE_MARKER = "@"


def _scan_operands(args: CommandLineArgs, responses: dict[str, bytes]) -> list[str]:
    operands: list[str] = []
    while args.has_next():
        if args.prepare_next():
            operands.append(args.current_token)
            continue
        if args.consume_prefix_char(RESPONSE_MARKER):
            assert args.replace_with_response(responses[args.remaining])
            continue
        operands.append(args.current_token)
    return operands


def test_command_line_program_name() -> None:
    assert CommandLineArgs(["prog"]).program_name == "prog"
    assert not CommandLineArgs(["prog"]).has_next()


def test_command_line_replace_with_response() -> None:
    args = CommandLineArgs(["prog", "a", "@rsp", "b"])
    operands = _scan_operands(args, {"rsp": b'x "y z"'})

    assert operands == ["a", "x", "y z", "b"]
    assert args.vector.as_list() == ["prog", "a", "x", "y z", "b"]


def test_command_line_expanded_tokens_are_not_split_again() -> None:
    args = CommandLineArgs(["prog", "@rsp"])
    operands = _scan_operands(args, {"rsp": b'"a b" """q"""'})
    assert operands == ["a b", '"q"']
    assert args.vector.as_list() == ["prog", "a b", '"q"']


def test_command_line_expanded_reference_is_scanned_again() -> None:
    args = CommandLineArgs(["prog", "@outer", "tail"])
    operands = _scan_operands(args, {"outer": b"head @inner", "inner": b"nested"})
    assert operands == ["head", "nested", "tail"]


def test_command_line_empty_response_removes_reference() -> None:
    args = CommandLineArgs(["prog", "@rsp", "b"])
    assert _scan_operands(args, {"rsp": b"# only comment\n"}) == ["b"]
    assert args.vector.as_list() == ["prog", "b"]


def test_command_line_response_failure_leaves_vector() -> None:
    def allocator(size: int) -> list[str]:
        raise MemoryError

    args = CommandLineArgs(["prog", "@rsp", "b"], allocator=allocator)
    assert not args.prepare_next()
    assert args.consume_prefix_char(RESPONSE_MARKER)

    assert not args.replace_with_response(b"x y")
    assert args.vector.as_list() == ["prog", "@rsp", "b"]
    assert args.remaining == "rsp"


def test_command_line_insert_response() -> None:
    args = CommandLineArgs(["prog", "a"])
    assert args.insert_response(b"x y")
    assert args.vector.as_list() == ["prog", "x", "y", "a"]

    operands = _scan_operands(args, {})
    assert operands == ["x", "y", "a"]


def test_command_line_options_from_response() -> None:
    args = CommandLineArgs(["prog", "@rsp"])
    assert not args.prepare_next()
    assert args.consume_prefix_char(RESPONSE_MARKER)
    assert args.replace_with_response(b"-o out\n-v")

    assert args.prepare_next()
    output = args.match_either_value("--output", "o", to_text)
    assert output is not None
    assert output.value == "out"

    assert args.prepare_next()
    assert args.match_short("v")
    assert not args.has_next()
