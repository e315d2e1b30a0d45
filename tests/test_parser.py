import pytest

from pyinifile import (
    Comment,
    DuplicateKeyError,
    FormatError,
    Ini,
    IniConfig,
    IniLoadSettings
)

GAME_STATE = """\
[Game State]
; comment
Player1=Ryan
Player2=Emma
"""

MESSY = (
    '  ; leading comment\n'
    '\n'
    '[ Spaced ]   \n'
    '   key   =   value   ; not a comment  \n'
    'empty=\n'
    '\n'
    '\n'
    '; trailing\n'
    '  \n'
)

HEREDOC = """\
[S]
Text = <<EOT
first line
  second = line

EOT
Next = 1
"""


class TestRoundTrip:

    @pytest.mark.parametrize('text', [
        GAME_STATE,
        MESSY,
        HEREDOC,
        '[A]\nx=1',
        '',
        '\n\n',
        '[a.b:c]\n$x.y~z = http://example.com/?q=1\n',
        '[Unicode]\nnamé = välue ✓\n',
        '[S]\nText=<<END\n  indented\nEND\n',
        '[Empty]\n[Also Empty]\n',
        '[S]\nText=<<EOT\nEOT\n',
        '[S]\nText=<<EOT\n\nEOT\n',
    ])
    def test_untouched_text_is_kept(self, text):
        assert str(Ini.load(text)) == text

    def test_edit_touches_one_line(self):
        ini = Ini.load(MESSY)
        ini['Spaced']['key'] = 'other'
        expected = MESSY.replace(
            '   key   =   value   ; not a comment  ',
            '   key   =   other  ')
        assert str(ini) == expected

    def test_line_breaks_are_normalized(self):
        assert str(Ini.load('[A]\r\nx=1\r\n')) == '[A]\nx=1\n'
        assert str(Ini.load('[A]\rx=1\r')) == '[A]\nx=1\n'

    def test_hash_comments(self):
        text = '# top\n[A]\n; semi\nx=1\n  #  x\n'
        with pytest.raises(FormatError):
            Ini.load(text)
        ini = Ini.load(text, config=IniConfig().allow_hash_for_comments())
        assert str(ini) == text
        assert [c.marker for c in ini['A'].minor_items] == ['#']


class TestStructure:

    def test_game_state(self):
        ini = Ini.load(GAME_STATE)
        assert list(ini) == ['Game State']
        section = ini['Game State']
        assert section['Player1'] == 'Ryan'
        assert section['Player2'] == 'Emma'
        assert section.minor_items == []
        comment, = section.properties[0].minor_items
        assert isinstance(comment, Comment)
        assert comment.text == 'comment'

    def test_decorations_attach_below(self):
        ini = Ini.load(MESSY)
        section = ini['Spaced']
        # leading comment and a blank line, above the section.
        assert len(section.minor_items) == 2
        empty = section.properties[1]
        assert empty.value == ''
        assert not empty.value.is_empty()
        # two blanks, comment, padded blank: nothing below them.
        assert len(ini.trailing_items) == 4
        assert ini.trailing_items[-1].padding.left == 2

    def test_final_newline(self):
        assert Ini.load('[A]\nx=1').final_newline is False
        assert Ini.load('[A]\nx=1\n').final_newline is True

    def test_heredoc(self):
        ini = Ini.load(HEREDOC)
        prop = ini['S'].find('Text')
        assert prop.multiline
        assert prop.eot == 'EOT'
        assert prop.value == 'first line\n  second = line\n'
        assert ini['S']['Next'] == '1'

    def test_heredoc_written_in_code(self):
        ini = Ini.load('[S]\n')
        ini['S']['Text'] = 'one\ntwo'
        reloaded = Ini.load(str(ini))
        assert reloaded['S']['Text'] == 'one\ntwo'

    @pytest.mark.parametrize('value', [
        'one\nEOT\ntwo',
        'EOT\nEOT1\n  EOT2  ',
        '<<abc',
        '<<EOT',
        '\n',
        '',
    ])
    def test_values_from_code_reload(self, value):
        ini = Ini.load('[S]\n')
        ini['S']['Text'] = value
        assert Ini.load(str(ini))['S']['Text'] == value

    def test_end_marker_avoids_value_lines(self):
        ini = Ini.load('[S]\n')
        ini['S']['Text'] = 'one\nEOT\ntwo'
        assert str(ini) == '[S]\nText = <<EOT1 \none\nEOT\ntwo\nEOT1\n'
        assert ini['S'].find('Text').eot == 'EOT'

    def test_heredoc_looking_value_is_wrapped(self):
        ini = Ini.load('[S]\n')
        ini['S']['Text'] = '<<abc'
        assert str(ini) == '[S]\nText = <<EOT \n<<abc\nEOT\n'

    def test_empty_heredoc(self):
        prop = Ini.load('[S]\nText=<<EOT\nEOT\n')['S'].find('Text')
        assert prop.value == ''
        assert prop.value.is_empty()
        blank = Ini.load('[S]\nText=<<EOT\n\nEOT\n')['S'].find('Text')
        assert not blank.value.is_empty()

    def test_unclosed_heredoc(self):
        with pytest.raises(FormatError) as e:
            Ini.load('[S]\nText=<<EOT\nabc\n')
        assert e.value.line_number == 2

    def test_heredoc_end_marker_is_case_sensitive(self):
        with pytest.raises(FormatError):
            Ini.load('[S]\nText=<<EOT\nabc\neot\n')


class TestLoadErrors:

    @pytest.mark.parametrize('text,line_number', [
        ('x=1\n[A]\n', 1),
        ('; c\nx=1\n', 2),
        ('[A]\nx=1\nnot a line\n', 3),
    ])
    def test_format_errors(self, text, line_number):
        with pytest.raises(FormatError) as e:
            Ini.load(text)
        assert e.value.line_number == line_number

    def test_duplicate_section(self):
        with pytest.raises(DuplicateKeyError):
            Ini.load('[A]\n[a]\n')
        ini = Ini.load('[A]\n[a]\n', IniLoadSettings(case_sensitive=True))
        assert list(ini) == ['A', 'a']

    def test_duplicate_property_warns(self):
        with pytest.warns(UserWarning, match='more than once'):
            ini = Ini.load('[A]\nx=1\nX=2\n')
        assert ini['A']['x'] == '1'
        assert len(ini['A']) == 2
        assert str(ini) == '[A]\nx=1\nX=2\n'

    def test_none_content(self):
        with pytest.raises(ValueError):
            Ini.load(None)


class TestLoadSettings:
    TEXT = '; c\n[A]\n\nx=1\n; t\n'

    @pytest.mark.parametrize('settings,expected', [
        (IniLoadSettings(ignore_comments=True), '[A]\n\nx=1\n'),
        (IniLoadSettings(ignore_blank_lines=True), '; c\n[A]\nx=1\n; t\n'),
        (IniLoadSettings(ignore_comments=True, ignore_blank_lines=True), '[A]\nx=1\n'),
    ])
    def test_ignore(self, settings, expected):
        assert str(Ini.load(self.TEXT, settings)) == expected

    def test_case_sensitive_properties(self):
        ini = Ini.load('[A]\nx=1\nX=2\n', IniLoadSettings(case_sensitive=True))
        assert ini['A']['x'] == '1'
        assert ini['A']['X'] == '2'
        assert 'a' not in ini
