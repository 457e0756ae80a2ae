import importlib.util
import struct
import xml.etree.ElementTree as xml
from pathlib import Path

import pytest
import yaml

from fsbank import SoundFormat
from fsbank.Enums import MetadataChunkType

SCRIPT = Path(__file__).resolve().parent.parent / 'FSB5 Bank Extractor.py'


@pytest.fixture(scope='module')
def extractor():
  spec = importlib.util.spec_from_file_location('fsb5_bank_extractor', SCRIPT)
  module = importlib.util.module_from_spec(spec)
  spec.loader.exec_module(module)
  return module


@pytest.fixture
def pcm_bank(tmp_path, build_fsb5, pack_sample_header):
  chunks = [(MetadataChunkType.LOOP, 8, struct.pack('<2I', 0, 4))]
  headers = [
    pack_sample_header(data_offset=0, samples=4, chunks=chunks),
    pack_sample_header(data_offset=16, samples=4, frequency_code=9),
  ]
  path = tmp_path / 'drums.fsb'
  path.write_bytes(build_fsb5(headers, names=['kick', 'snare'], data=bytes(32), mode=SoundFormat.PCM16))
  return path


def test_extracts_wav_files_and_yaml_manifest(extractor, tmp_path, pcm_bank):
  out = tmp_path / 'out'

  assert extractor.main([str(pcm_bank), '-d', str(out), '-o', 'yaml']) == 0

  assert (out / 'drums' / 'kick.wav').read_bytes()[:4] == b'RIFF'
  assert (out / 'drums' / 'snare.wav').exists()

  [manifest] = out.glob('BANK_drums_*.yaml')
  data = yaml.safe_load(manifest.read_text(encoding='utf-8'))
  assert data['bank'] == 'drums'
  assert data['header']['mode'] == 'PCM16'
  assert [sample['name'] for sample in data['samples']] == ['kick [0]', 'snare [1]']
  assert data['samples'][0]['metadata'] == [{'type': 'LOOP', 'loop': [0, 4]}]


def test_xml_manifest(extractor, tmp_path, pcm_bank):
  out = tmp_path / 'out'

  assert extractor.main([str(pcm_bank), '-d', str(out), '-o', 'xml']) == 0

  [manifest] = out.glob('BANK_drums_*.xml')
  root = xml.parse(manifest).getroot()
  assert root.tag == 'bank'
  assert root.find('header').get('mode') == 'PCM16'
  samples = root.find('samples').findall('sample')
  assert [sample.get('name') for sample in samples] == ['kick', 'snare']
  assert samples[0].find('metadata').find('chunk').get('loop_end') == '4'


def test_unsupported_format_writes_raw_payload(extractor, tmp_path, build_fsb5, pack_sample_header):
  path = tmp_path / 'music.fsb'
  path.write_bytes(build_fsb5([pack_sample_header()], names=['theme'], data=b'\x07' * 16, mode=SoundFormat.VORBIS))
  out = tmp_path / 'out'

  assert extractor.main([str(path), '-d', str(out)]) == 0
  assert (out / 'music' / 'theme.ogg').read_bytes() == b'\x07' * 16


def test_duplicate_and_unsafe_names(extractor, tmp_path, build_fsb5, pack_sample_header):
  headers = [pack_sample_header(data_offset=0), pack_sample_header(data_offset=16)]
  path = tmp_path / 'sfx.fsb'
  path.write_bytes(build_fsb5(headers, names=['a/b', 'a/b'], data=bytes(32), mode=SoundFormat.MPEG))
  out = tmp_path / 'out'

  assert extractor.main([str(path), '-d', str(out)]) == 0
  assert sorted(p.name for p in (out / 'sfx').iterdir()) == ['a_b.mp3', 'a_b_1.mp3']


def test_bad_file_sets_exit_status(extractor, tmp_path, pcm_bank):
  bad = tmp_path / 'bad.fsb'
  bad.write_bytes(b'NOPE' + bytes(60))
  out = tmp_path / 'out'

  assert extractor.main([str(bad), str(pcm_bank), '-d', str(out)]) == 1
  assert (out / 'drums' / 'kick.wav').exists()
