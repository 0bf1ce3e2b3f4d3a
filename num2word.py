import argparse

from number_words import (
    PROMPT,
    digit_groups,
    format_result,
    in_range,
    number_to_words,
    parse_number,
)


def run_prompt():
    # Malformed input is left to raise: there is no retry loop.
    value = parse_number(input(PROMPT))
    line = format_result(value)
    print(line)
    return line


def print_spelling(value):
    words = number_to_words(value)
    print(f"Number: {value}")
    print(f"Words: {words!r}")
    if in_range(value):
        groups = " ".join(str(group) for group in digit_groups(value))
        print(f"Digit groups: {groups}")
    print(f"Length: {len(words)}")


def main(argv=None):
    parser = cmdline_parser()
    args = parser.parse_args(argv)

    if args.no_browser and not args.data_probe:
        parser.error("--no-browser requires --data-probe.")
    if args.probe_output is not None and not args.data_probe:
        parser.error("--probe-output requires --data-probe.")

    if args.data_probe:
        from tests.word_probes import run_word_probes

        path = run_word_probes(
            output_path=args.probe_output,
            open_browser=not args.no_browser,
        )
        print(f"Wrote probe report to {path}")
        return

    if args.spell is not None:
        print_spelling(args.spell)
        return

    run_prompt()


def cmdline_parser():
    epilog = (
        "With no options, reads one number from standard input and prints it\n"
        "in words. Valid numbers are 1..9999; anything else prints\n"
        "'Out of Range'.\n"
    )
    parser = argparse.ArgumentParser(
        description="Spell out a number from 1 to 9999 in English words.",
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--spell",
        type=int,
        help="Print the spelled-out form of an integer, its digit groups and length.",
    )
    group.add_argument(
        "--data-probe",
        action="store_true",
        help="Generate the word probe report and open it.",
    )
    parser.add_argument(
        "--probe-output",
        default=None,
        help="Path of the probe HTML report (default: tests/word-probes/).",
    )
    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Do not open the probe report in a browser.",
    )

    return parser


if __name__ == "__main__":
    main()
