# -*- encoding: utf-8 -*-
# @File   : test_words.py
# @Time   : 2026/10/17 16:02:35
# @Author : Kariko Lin

import pytest

from pyscfg.words import TokenizeError, join, quote, split


def test_split_plain_words():
    assert split('dir1 param1   param2\tparam3') == [
        'dir1', 'param1', 'param2', 'param3']


def test_split_quotes():
    assert split('dir4 "param 1" \'param 2\'') == ['dir4', 'param 1', 'param 2']
    assert split(r'say "a \"b\""') == ['say', 'a "b"']
    assert split("empty '' \"\"") == ['empty', '', '']


@pytest.mark.parametrize('line', ['', '   ', '# comment', '   # indented'])
def test_split_blank_and_comment(line):
    assert split(line) == []


def test_split_trailing_comment():
    assert split('port 6697 # tls') == ['port', '6697']
    assert split('dir a # c') == ['dir', 'a']
    assert split('dir a #c "unterminated') == ['dir', 'a']
    assert split('  # only') == []


def test_split_hash_not_starting_a_word():
    assert split('a#b') == ['a#b']
    assert split("'#x'") == ['#x']
    assert split('color "#fff" tail') == ['color', '#fff', 'tail']


@pytest.mark.parametrize('line', ['key "unterminated', "key 'nope", 'key \\'])
def test_split_errors(line):
    with pytest.raises(TokenizeError) as e:
        split(line)
    assert isinstance(e.value, ValueError)
    assert e.value.line == line


def test_quote():
    assert quote('param1') == 'param1'
    assert quote('320km/h') == '320km/h'
    assert quote('param 1') == "'param 1'"
    assert quote('') == "''"
    assert quote("it's") == "'it'\"'\"'s'"
    assert quote('{') == "'{'"


@pytest.mark.parametrize('word', [
    'plain', 'with space', "it's", 'say "hi"', '{', '}', '#x', '\\', '',
    'tab\there', 'Tōhoku',
])
def test_quote_split_inverse(word):
    assert split(quote(word)) == [word]
    assert split(f'name {quote(word)} tail') == ['name', word, 'tail']


def test_join():
    assert join(['dir', 'a b', 'c']) == "dir 'a b' c"
    assert split(join(['x', "y'z", ''])) == ['x', "y'z", '']
