from __future__ import annotations

import pytest

from exactconv.cli import convert, show_layout, show_ranges


def test_show_layout_binary(capsys):
    assert show_layout.main(['--format', 'f32']) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        'BITS = 32  EXP_BITS = 8  SIG_BITS = 23  EXP_BIAS = 127',
        'EXP_MASK = 01111111100000000000000000000000',
        'SIG_MASK = 00000000011111111111111111111111',
    ]


def test_show_layout_hex_all(capsys):
    assert show_layout.main(['--hex']) == 0
    out = capsys.readouterr().out
    assert 'EXP_MASK = 0x7F800000' in out
    assert 'SIG_MASK = 0x007FFFFF' in out
    assert 'BITS = 64  EXP_BITS = 11  SIG_BITS = 52  EXP_BIAS = 1023' in out
    assert 'EXP_MASK = 0x7FF0000000000000' in out
    assert 'SIG_MASK = 0x000FFFFFFFFFFFFF' in out


def test_show_ranges_f32(capsys):
    assert show_ranges.main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert 'f32 => u8   : [0,256)' in out
    assert 'f32 => i8   : [-128,128)' in out
    assert 'f32 => u128 : [0,inf)' in out
    assert f'f32 => i128 : [{-2 ** 127},{2 ** 127})' in out


def test_show_ranges_all(capsys):
    assert show_ranges.main(['--format', 'all']) == 0
    out = capsys.readouterr().out
    assert f'f64 => u128 : [0,{2 ** 128})' in out
    assert 'f32 => u16  : [0,65536)' in out


def test_convert_mixed(capsys):
    rc = convert.main(['--to', 'i8', '--format', 'f32', '3', '-128', '127.0', '128', '3.14', 'nan'])
    assert rc == 1
    out = capsys.readouterr().out.splitlines()
    assert out == [
        '3 -> 3',
        '-128 -> -128',
        '127.0 -> 127',
        '128 -> overflow',
        '3.14 -> inexact',
        'nan -> overflow',
    ]


def test_convert_all_exact(capsys):
    assert convert.main(['--to', 'u64', '0x10', '0x1.8p3', '1e3']) == 0
    assert capsys.readouterr().out.splitlines() == ['0x10 -> 16', '0x1.8p3 -> 12', '1e3 -> 1000']


def test_convert_inexact(capsys):
    assert convert.main(['--to', 'i32', '2.5']) == 1
    assert capsys.readouterr().out.strip() == '2.5 -> inexact'


def test_parse_value():
    assert convert.parse_value('42') == 42
    assert convert.parse_value(' -7 ') == -7
    assert convert.parse_value('2.5') == 2.5
    assert convert.parse_value('-0x1p4') == -16.0


def test_convert_rejects_garbage():
    with pytest.raises(SystemExit):
        convert.main(['--to', 'u8', 'abc'])
