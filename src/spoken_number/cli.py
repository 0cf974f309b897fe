"""Command line interface: spoken-number encode | decode | latin | normalize."""

import argparse
import json
import logging
import sys

from spoken_number.codec.config import CodecConfig
from spoken_number.codec.decoder import phrase_to_number
from spoken_number.codec.encoder import PhraseEncoder
from spoken_number.core.contracts import validate_canonical_number, validate_phrase_record
from spoken_number.core.domain.canonical_number import FractionMode
from spoken_number.core.domain.phrase_record import PhraseRecord
from spoken_number.core.domain.vocabulary import EXPONENTIATED
from spoken_number.core.math.latin_power import latin_power_name, latin_power_name_to_latin_power
from spoken_number.core.math.normalizer import HIGH_PRECISION_THRESHOLD, normalize, render

logger = logging.getLogger(__name__)

EXIT_CODEC_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spoken-number",
        description="Convert between decimal numbers and English numeral phrases",
    )
    parser.add_argument("--debug", default=False, action="store_true", help="Turn on debugging")
    parser.add_argument("--json", default=False, action="store_true", help="Emit JSON records")
    parser.add_argument("--threshold", type=int, default=HIGH_PRECISION_THRESHOLD,
                        help="Digit span after which numbers use exponential form")
    commands = parser.add_subparsers(dest="command", required=True)

    encode = commands.add_parser("encode", help="Number to phrase")
    encode.add_argument("number", help="Decimal or exponential number")
    encode.add_argument("--mode", choices=[m.value.lower() for m in FractionMode],
                        default=FractionMode.DEFAULT.value.lower(), help="Fraction phrasing")
    encode.add_argument("--exponential", default=False, action="store_true",
                        help="Always phrase as mantissa times ten to the exponent")

    decode = commands.add_parser("decode", help="Phrase to number")
    decode.add_argument("phrase", nargs="+", help="English numeral phrase")

    latin = commands.add_parser("latin", help="Latin power names")
    latin.add_argument("power", nargs="?", type=int, help="Illion index (1 = million)")
    latin.add_argument("--parse", metavar="NAME", help="Name to convert back to its index")
    latin.add_argument("--dashes", default=False, action="store_true", help="Separate name parts")

    normalize_cmd = commands.add_parser("normalize", help="Canonical number notation")
    normalize_cmd.add_argument("number", help="Decimal or exponential number")
    return parser


def _encode(args: argparse.Namespace, config: CodecConfig) -> str:
    encoder = PhraseEncoder(config)
    mode = FractionMode(args.mode.upper())
    if args.exponential:
        phrase = encoder.encode_exponential(args.number)
    else:
        phrase = encoder.encode(args.number, mode)
    if not args.json:
        return phrase

    record = PhraseRecord(
        number=render(normalize(args.number, config.high_precision_threshold)),
        phrase=phrase,
        fraction_mode=mode,
        exponential=EXPONENTIATED in phrase,
    )
    data = record.model_dump(mode="json")
    validate_phrase_record(data)
    return json.dumps(data)


def _decode(args: argparse.Namespace, config: CodecConfig) -> str:
    phrase = " ".join(" ".join(args.phrase).lower().split())
    number = phrase_to_number(phrase, config)
    if not args.json:
        return number

    record = PhraseRecord(number=number, phrase=phrase, exponential=EXPONENTIATED in phrase)
    data = record.model_dump(mode="json")
    validate_phrase_record(data)
    return json.dumps(data)


def _latin(args: argparse.Namespace, parser: argparse.ArgumentParser) -> str:
    if (args.power is None) == (args.parse is None):
        parser.error("latin needs exactly one of POWER or --parse NAME")
    if args.parse is not None:
        power = latin_power_name_to_latin_power(args.parse)
        name = latin_power_name(power, dashes=args.dashes)
        result = str(power)
    else:
        power = args.power
        name = latin_power_name(power, dashes=args.dashes)
        result = name
    return json.dumps({"power": power, "name": name}) if args.json else result


def _normalize(args: argparse.Namespace, config: CodecConfig) -> str:
    canonical = normalize(args.number, config.high_precision_threshold)
    if not args.json:
        return render(canonical)
    data = canonical.model_dump()
    validate_canonical_number(data)
    return json.dumps(data)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(format="%(asctime)s [%(levelname)-8s] (%(filename)s:%(lineno)d)  %(message)s",
                        level=logging.DEBUG if args.debug else logging.WARNING)

    try:
        config = CodecConfig(high_precision_threshold=args.threshold)
        if args.command == "encode":
            output = _encode(args, config)
        elif args.command == "decode":
            output = _decode(args, config)
        elif args.command == "latin":
            output = _latin(args, parser)
        else:
            output = _normalize(args, config)
    except ValueError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"spoken-number: error: {e}", file=sys.stderr)
        return EXIT_CODEC_ERROR

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
