import os
import importlib.util
from pathlib import Path
import argparse
import logging

from bitblocks.hdl import get_lang_map

logger = logging.getLogger(__name__)

def load_design(file: Path):
    spec = importlib.util.spec_from_file_location(file.stem, str(file))
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    design = getattr(module, 'design', None)
    if not callable(design):
        return None
    return design()

def main(argv=None):
    lang_map = get_lang_map()

    parser = argparse.ArgumentParser(prog='bitblocks', description='Export bitblocks designs to HDL')
    parser.add_argument('-i', '--input', required=False, default='.', help='Base path to find designs. Can be a file or a directory (defaults to .)')
    parser.add_argument('-r', '--recursive', required=False, action='store_true', default=False, help='If input is a directory, look for design files recursively')
    parser.add_argument('-o', '--output', required=True, default=None, help='Output directory to store results')
    parser.add_argument('-v', '--verbose', required=False, action='store_true', default=False, help='Log debug messages')
    parser.add_argument('--all', required=False, action='store_true', default=False, help='Convert to all HDL languages')

    for name in lang_map.keys():
        parser.add_argument(f'--{name}', required=False, action='store_true', default=False, help=f'Convert to {name}')

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format='%(levelname)s: %(message)s')

    design_path = Path(args.input)

    if design_path.is_dir():
        input_files = sorted((design_path.rglob if args.recursive else design_path.glob)('*.py'))
    elif design_path.is_file():
        input_files = [design_path]
        design_path = design_path.parent
    else:
        parser.error(f"Invalid input path: {design_path}")

    output_path = Path(args.output)

    os.makedirs(str(output_path), exist_ok=True)

    hdl_mappings = []
    for name, HDLType in lang_map.items():
        if getattr(args, name) or args.all:
            hdl_mappings.append(HDLType())

    if not hdl_mappings:
        logger.warning("No HDL language selected, nothing to convert")

    skipped = 0
    for file in input_files:
        try:
            result = load_design(file)
            if result is None:
                logger.warning(f"Skipping {file}, design not defined")
                skipped += 1
                continue

            elaboratable, ports = result
            output_template = output_path / file.relative_to(design_path)
            os.makedirs(output_template.parent, exist_ok=True)

            for hdl in hdl_mappings:
                output_file = output_template.with_suffix(f'.{hdl.default_extension}')
                text = hdl.convert(elaboratable, name=file.stem, ports=ports)
                output_file.write_text(f'{hdl.comment(f"Generated by bitblocks from {file.name}")}\n{text}')
                logger.info(f"Wrote {output_file}")

        except Exception as e:
            logger.warning(f"Skipping {file}, design failed: {e}")
            skipped += 1

    return 1 if skipped else 0

if __name__ == '__main__':
    raise SystemExit(main())
