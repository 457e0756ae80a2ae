''' A script for extracting the samples of FSB5 sound banks, with an optional XML or YAML manifest of each bank '''

# Define current version
CURRENT_VERSION = '2026.10.18'

# Imports
import os
import re
import sys
import logging
import argparse
import datetime
from typing import Final
import xml.etree.ElementTree as xml

# Ensure /fsbank is present and can be imported
try:
  import fsbank

  # Import the sound bank
  from fsbank.soundbank.Soundbank import FSB5

  # Import the XML Tag enum
  from fsbank.Enums import XMLTags
  from fsbank.Errors import FSB5Error

  from fsbank.YAMLSerializer import *

except ImportError as e:
  print("Error: One or more required utilities are missing.")
  print(f"Details: {e}")
  print("\nPlease ensure the 'fsbank' package is correctly installed and all its dependencies are available.")
  sys.exit(1)

logger = logging.getLogger('fsb5_extractor')

# Create ANSI formatting for terminal messages
# ANSI COLORS: https://talyian.github.io/ansicolors/
# TERMINAL TEXT COLORS
RED        : Final = '\x1b[31m'
YELLOW_229 : Final = '\x1b[38;5;229m'
BLUE_39    : Final = '\x1b[38;5;39m'
GRAY_245   : Final = '\x1b[38;5;245m'
GRAY_248   : Final = '\x1b[38;5;248m'
GREEN_79   : Final = '\x1b[38;5;79m'

# TERMINAL TEXT STYLES
BOLD      : Final = '\x1b[1m'
RESET     : Final = '\x1b[0m' # Resets all text styles and colors

# Argument Parser
def parse_args(argv=None):
  parser = argparse.ArgumentParser(
    formatter_class=argparse.RawDescriptionHelpFormatter,
    usage=f'{GRAY_248}[>_]{RESET} {YELLOW_229}python{RESET} {BLUE_39}{os.path.basename(sys.argv[0])}{RESET} {GRAY_245}[-h]{RESET} {BLUE_39}file [files ...]{RESET} {GRAY_245}[-d DIRECTORY] [-o {{xml, yaml}}] [-v]{RESET}',
    description='''This script extracts the samples of FSB5 sound banks, rebuilding MPEG and PCM samples into playable files.'''
  )

  parser.add_argument(
    'files',
    nargs='+',
    help="one or more FSB5 sound bank files (.fsb)"
  )
  parser.add_argument(
    '-d',
    '--directory',
    default='.',
    help="directory the extracted samples are written to, one subdirectory per bank (defaults to the current directory)"
  )
  parser.add_argument(
    '-o',
    '--output',
    choices=['xml', 'yaml'],
    required=False,
    help="also writes a manifest of each bank in the given format"
  )
  parser.add_argument(
    '-v',
    '--verbose',
    action='store_true',
    help="prints debug messages while decoding"
  )

  return parser.parse_args(argv)

# Create date for the manifests and filenames
DATE = datetime.datetime.now().replace(microsecond=0).isoformat(' ')
DATE_FILENAME = datetime.datetime.now().strftime("%Y%m%d-%H%M%S")

''' XML Writing Functions '''
def dict_to_xml(tag: str, d, parent: xml.Element = None) -> xml.Element:
    ''' Convert nested dictionary to XML '''
    if isinstance(d, dict):
      element = xml.Element(tag)

      for key, value in d.items():
        # Recursion if the value is a dict
        if isinstance(value, dict):
          dict_to_xml(key, value, element)

        # Create multiple separate elements for each list entry
        elif isinstance(value, list):
          for item in value:
            if isinstance(item, dict):
              dict_to_xml(key, item, element)

        else:
          element.set(key, str(value) if value is not None else "")

    else:
      # If it's a string, just add it as the text content
      element = xml.Element(tag)
      element.text = str(d) if d is not None else ""

    if parent is not None:
      parent.append(element)

    return element

def create_xml_manifest(path: str, bank_name: str, fsb: FSB5) -> None:
  ''' Build XML file '''
  bank_dict = fsb.to_dict()

  xml_root = xml.Element(XMLTags.BANK.value)
  xml_root.set('name', bank_name)
  xml_root.set('raw_size', str(fsb.raw_size))

  dict_to_xml(XMLTags.HEADER.value, bank_dict['header'], xml_root)
  dict_to_xml(XMLTags.SAMPLES.value, bank_dict['samples'], xml_root)

  xml_tree = xml.ElementTree(xml_root)
  xml_comment = xml.Comment(f'\n      SOURCE BANK: {bank_name}\n      DATE CREATED: {DATE}\n  ')

  with open(path, 'wb') as f:
    xml.indent(xml_tree)
    f.write(b'<?xml version="1.0" encoding="UTF-8"?>\n')
    f.write(xml.tostring(xml_comment) + b'\n')
    xml_tree.write(f, encoding='utf-8', xml_declaration=False)

''' Yaml Writing Functions '''
def create_yaml_manifest(path: str, bank_name: str, fsb: FSB5) -> None:
  output_yaml = {
    "bank": bank_name,
    "date created": DATE,
    **fsb.to_yaml()
  }

  with open(path, 'w', encoding='utf-8') as f:
    dump_manifest(output_yaml, f)

''' Sample Writing Functions '''
def sanitize_name(name: str) -> str:
  name = re.sub(r'[<>:"/\\|?*\x00-\x1f]', '_', name).strip()
  return name or 'unnamed'

def extract_samples(fsb: FSB5, output_dir: str) -> list[str]:
  os.makedirs(output_dir, exist_ok=True)

  can_rebuild = fsb.supports_rebuild
  if not can_rebuild:
    logger.warning("Rebuilding %s samples is not supported, writing raw sample data", fsb.header.mode.name)

  written = []
  used_names = set()
  for sample in fsb.samples:
    data = fsb.rebuild(sample) if can_rebuild else sample.data

    # Duplicate names get their index appended
    name = sanitize_name(sample.name)
    if name in used_names:
      name = f'{name}_{sample.index}'
    used_names.add(name)

    path = os.path.join(output_dir, f'{name}.{fsb.file_extension}')
    with open(path, 'wb') as f:
      f.write(data)

    logger.debug("Wrote sample %d to %s (%d bytes)", sample.index, path, len(data))
    written.append(path)

  return written

''' Main Function '''
def main(argv=None) -> int:
  args = parse_args(argv)

  logging.basicConfig(
    level=logging.DEBUG if args.verbose else logging.INFO,
    format=f'{GRAY_245}[%(levelname)s]{RESET} %(message)s'
  )

  failures = 0
  for file in args.files:
    bank_name = os.path.basename(os.path.splitext(file)[0])

    try:
      fsb = FSB5.from_file(file)
    except (FSB5Error, OSError) as e:
      logger.error(f"{RED}Failed to read {file}: {e}{RESET}")
      failures += 1
      continue

    output_dir = os.path.join(args.directory, bank_name)
    try:
      written = extract_samples(fsb, output_dir)
    except (FSB5Error, OSError) as e:
      logger.error(f"{RED}Failed to extract {file}: {e}{RESET}")
      failures += 1
      continue

    if args.output == 'yaml':
      create_yaml_manifest(os.path.join(args.directory, f'BANK_{bank_name}_{DATE_FILENAME}.yaml'), bank_name, fsb)
    elif args.output == 'xml':
      create_xml_manifest(os.path.join(args.directory, f'BANK_{bank_name}_{DATE_FILENAME}.xml'), bank_name, fsb)

    logger.info(f"{GREEN_79}{BOLD}{bank_name}{RESET}: extracted {len(written)} {fsb.header.mode.name} sample(s) to {output_dir}")

  return 1 if failures else 0

if __name__ == '__main__':
  sys.exit(main())
