import io

import pytest
from bs4 import BeautifulSoup
from pydantic import BaseModel
from rich.console import Console

from htmlscraper import (
    AggregateError,
    AttributeNotFoundError,
    Field,
    Mode,
    Scraper,
    extract_method,
    print_error_report,
)
from htmlscraper.selection import node_attributes

DICTIONARY_HTML = """
<div class="webtop">
  <h1 class="headword" id="direct_h_1" htag="h1" hclass="headword">direct</h1>
  <span class="pos" hclass="pos" htag="span">adjective</span>
  <div class="symbols" hclass="symbols" htag="div">
    <a href="https://www.oxfordlearnersdictionaries.com/wordlists/oxford3000-5000?dataset=english;list=ox3000&amp;level=a2"><span class="ox3ksym_a2">&nbsp;</span></a>
    <a href="https://www.oxfordlearnersdictionaries.com/wordlists/opal?dataset=english&amp;list=opal_written&amp;level=sublist_3"><span class="opal_symbol">OPAL W</span></a>
  </div>
  <span class="phonetics">
    <div class="phons_br" geo="br" wd="direct">
      <div class="sound audio_play_button pron-uk" data-src-mp3="https://example.org/uk/direct__gb_7.mp3" title="direct pronunciation
                    English">&nbsp;</div><span class="phon">/dəˈrekt/</span><span class="sep">,</span>
      <div class="sound audio_play_button pron-uk" data-src-mp3="https://example.org/uk/direct__gb_8.mp3">&nbsp;</div><span class="phon">/daɪˈrekt/</span>
    </div>
    <div class="phons_n_am" geo="n_am" wd="direct">
      <div class="sound audio_play_button pron-us" data-src-mp3="https://example.org/us/direct__us_1_rr.mp3">&nbsp;</div><span class="phon">/dəˈrekt/</span><span class="sep">,</span>
      <div class="sound audio_play_button pron-us" data-src-mp3="https://example.org/us/direct__us_2_rr.mp3">&nbsp;</div><span class="phon">/daɪˈrekt/</span>
    </div>
  </span>
</div>
"""


@extract_method('*level')
def level(node, spec):
    href = node_attributes(node).get('href', '')
    last = href.split('&')[-1]
    if last.startswith('level='):
        return last.removeprefix('level=')
    return ''


class Symbols(BaseModel):
    href: str = Field(extract='@href')
    level: str = Field(extract='*level')


class Phonetic(BaseModel):
    audio: list[str] = Field(select='.sound', extract='@data-src-mp3')
    transcript: list[str] = Field(select='.phon', extract='text')


class Phonetics(BaseModel):
    uk: Phonetic = Field(select='.phons_br')
    us: Phonetic = Field(select='.phons_n_am')


class Entry(BaseModel):
    term: str = Field(select='.headword', extract='text')
    pos: str = Field(select='.pos', extract='text')
    symbols: Symbols | None = Field(select='.symbols a')
    phonetics: Phonetics = Field(select='.phonetics')


class BrokenPhonetic(BaseModel):
    audio: list[str] = Field(select='.sound', extract='@data-src-ogg')
    transcript: list[str] = Field(select='.phon', extract='text')


class BrokenEntry(BaseModel):
    term: str = Field(select='.headword', extract='text')
    uk: BrokenPhonetic = Field(select='.phonetics .phons_br')
    etymology: str = Field(select='.etym', extract='deeptext')


@pytest.fixture
def dictionary_doc():
    return BeautifulSoup(DICTIONARY_HTML, 'html.parser')


def test_scrape_dictionary_entry(dictionary_doc):
    scraper = Scraper(extractors=[level])

    entry = scraper.scrape(dictionary_doc, Entry)

    assert entry.term == 'direct'
    assert entry.pos == 'adjective'
    assert entry.symbols == Symbols(
        href='https://www.oxfordlearnersdictionaries.com/wordlists/oxford3000-5000?dataset=english;list=ox3000&level=a2',
        level='a2',
    )
    assert entry.phonetics.uk == Phonetic(
        audio=['https://example.org/uk/direct__gb_7.mp3', 'https://example.org/uk/direct__gb_8.mp3'],
        transcript=['/dəˈrekt/', '/daɪˈrekt/'],
    )
    assert entry.phonetics.us == Phonetic(
        audio=['https://example.org/us/direct__us_1_rr.mp3', 'https://example.org/us/direct__us_2_rr.mp3'],
        transcript=['/dəˈrekt/', '/daɪˈrekt/'],
    )


def test_scrape_dictionary_without_custom_extractor(dictionary_doc):
    with pytest.raises(AggregateError) as exc_info:
        Scraper(mode=Mode.TOLERANT).scrape(dictionary_doc, Entry)

    error = exc_info.value
    assert [str(e) for e in error.errors] == [".symbols a: invalid extract: '*level'"]
    assert error.errors[0].field == 'symbols.level'
    assert error.value.symbols.level == ''
    assert error.value.phonetics.us.transcript == ['/dəˈrekt/', '/daɪˈrekt/']


def test_tolerant_report_for_nested_failures(dictionary_doc):
    with pytest.raises(AggregateError) as exc_info:
        Scraper(mode=Mode.TOLERANT).scrape(dictionary_doc, BrokenEntry)

    error = exc_info.value
    assert [str(e) for e in error.errors] == [
        '.phonetics .phons_br > .sound[0]: attribute data-src-ogg not found',
        '.phonetics .phons_br > .sound[1]: attribute data-src-ogg not found',
        '.etym: no nodes found',
    ]
    assert [e.field for e in error.errors] == ['uk.audio[0]', 'uk.audio[1]', 'etymology']
    assert error.value.term == 'direct'
    assert error.value.uk.audio == ['', '']
    assert error.value.uk.transcript == ['/dəˈrekt/', '/daɪˈrekt/']

    console = Console(file=io.StringIO(), record=True, width=200)
    print_error_report(error, console)
    assert 'Scrape finished with 3 errors' in console.export_text()


def test_strict_reports_first_nested_failure(dictionary_doc):
    with pytest.raises(AttributeNotFoundError) as exc_info:
        Scraper(mode=Mode.STRICT).scrape(dictionary_doc, BrokenEntry)

    assert str(exc_info.value) == '.phonetics .phons_br > .sound[0]: attribute data-src-ogg not found'


def test_silent_fills_gaps(dictionary_doc):
    entry = Scraper(mode=Mode.SILENT).scrape(dictionary_doc, BrokenEntry)

    assert entry.term == 'direct'
    assert entry.uk.audio == ['', '']
    assert entry.etymology == ''
