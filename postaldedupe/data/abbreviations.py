"""
Built-in multilingual dictionaries for address normalization.

Keys are lowercase, accent-free tokens as produced by the expander's
normalization step. Each language maps an abbreviation to its expansions;
the abbreviation itself is always kept as a valid form.
"""

from typing import Dict, List

SUPPORTED_LANGUAGES = ['en', 'fr', 'de', 'es', 'it', 'pt']

ABBREVIATIONS: Dict[str, Dict[str, List[str]]] = {
    'en': {
        'st': ['street', 'saint'],
        'str': ['street'],
        'ave': ['avenue'],
        'av': ['avenue'],
        'rd': ['road'],
        'blvd': ['boulevard'],
        'dr': ['drive', 'doctor'],
        'ln': ['lane'],
        'ct': ['court'],
        'pl': ['place'],
        'sq': ['square'],
        'cres': ['crescent'],
        'ter': ['terrace'],
        'hwy': ['highway'],
        'pkwy': ['parkway'],
        'cir': ['circle'],
        'trl': ['trail'],
        'aly': ['alley'],
        'n': ['north'],
        's': ['south'],
        'e': ['east'],
        'w': ['west'],
        'ne': ['northeast'],
        'nw': ['northwest'],
        'se': ['southeast'],
        'sw': ['southwest'],
        'mt': ['mount'],
        'ft': ['fort'],
        'co': ['county', 'company'],
        'twp': ['township'],
        'apt': ['apartment'],
        'ste': ['suite'],
        'fl': ['floor'],
        'bldg': ['building'],
        'no': ['number'],
        'univ': ['university'],
        'hosp': ['hospital'],
    },
    'fr': {
        'av': ['avenue'],
        'ave': ['avenue'],
        'bd': ['boulevard'],
        'bld': ['boulevard'],
        'bvd': ['boulevard'],
        'ch': ['chemin'],
        'pl': ['place'],
        'imp': ['impasse'],
        'rte': ['route'],
        'fg': ['faubourg'],
        'all': ['allee'],
        'sq': ['square'],
        'st': ['saint'],
        'ste': ['sainte'],
        'apt': ['appartement'],
        'app': ['appartement'],
        'bp': ['boite postale'],
    },
    'de': {
        'str': ['strasse'],
        'pl': ['platz'],
        'hnr': ['hausnummer'],
        'nr': ['nummer'],
        'og': ['obergeschoss'],
        'eg': ['erdgeschoss'],
        'pf': ['postfach'],
        'whg': ['wohnung'],
        'st': ['sankt'],
    },
    'es': {
        'c': ['calle'],
        'cl': ['calle'],
        'cll': ['calle'],
        'av': ['avenida'],
        'avda': ['avenida'],
        'pza': ['plaza'],
        'pl': ['plaza'],
        'ctra': ['carretera'],
        'pso': ['paseo'],
        'sta': ['santa'],
        'sto': ['santo'],
        'dpto': ['departamento'],
        'depto': ['departamento'],
        'no': ['numero'],
        'num': ['numero'],
    },
    'it': {
        'v': ['via'],
        'vle': ['viale'],
        'pza': ['piazza'],
        'p': ['piazza'],
        'cso': ['corso'],
        'lgo': ['largo'],
        'vco': ['vicolo'],
        's': ['san', 'santo'],
        'sta': ['santa'],
        'int': ['interno'],
        'n': ['numero'],
    },
    'pt': {
        'r': ['rua'],
        'av': ['avenida'],
        'pc': ['praca'],
        'pca': ['praca'],
        'trav': ['travessa'],
        'tv': ['travessa'],
        'lg': ['largo'],
        'est': ['estrada'],
        's': ['sao'],
        'sta': ['santa'],
        'apto': ['apartamento'],
        'cx': ['caixa'],
    },
}

# Abbreviated endings of compound words (Hauptstr -> Hauptstrasse)
SUFFIX_ABBREVIATIONS: Dict[str, Dict[str, str]] = {
    'de': {
        'str': 'strasse',
        'pl': 'platz',
    },
}

# Words that introduce the value of a numeric field rather than being part of it
DESIGNATORS: Dict[str, frozenset] = {
    'house_number': frozenset({
        'no', 'nr', 'num', 'number', 'numero', 'n', 'hausnummer', 'hnr', 'nummer',
    }),
    'unit': frozenset({
        'apt', 'apartment', 'unit', 'suite', 'ste', 'flat', 'rm', 'room',
        'appartement', 'app', 'appt', 'wohnung', 'whg', 'apartamento', 'apto',
        'depto', 'dpto', 'departamento', 'interno', 'int', 'no', 'number',
    }),
    'floor': frozenset({
        'floor', 'fl', 'flr', 'level', 'lvl', 'lv', 'etage', 'et', 'stock',
        'stockwerk', 'og', 'obergeschoss', 'piso', 'planta', 'piano', 'andar',
    }),
    'po_box': frozenset({
        'po', 'p', 'o', 'box', 'pobox', 'post', 'office', 'postal', 'postfach',
        'pf', 'bp', 'boite', 'postale', 'apartado', 'casilla', 'caixa', 'cx',
        'casella', 'cp',
    }),
    'postal_code': frozenset({
        'zip', 'plz', 'cp', 'cap', 'postcode',
    }),
}

# Floor names that stand for a number
FLOOR_WORDS: Dict[str, str] = {
    'ground': '0',
    'gf': '0',
    'eg': '0',
    'erdgeschoss': '0',
    'rdc': '0',
    'bajo': '0',
    'terra': '0',
    'terreo': '0',
    'basement': '-1',
    'first': '1',
    'second': '2',
    'third': '3',
    'fourth': '4',
    'fifth': '5',
    'premier': '1',
    'premiere': '1',
    'deuxieme': '2',
    'primero': '1',
    'segundo': '2',
    'primo': '1',
    'secondo': '2',
}

# Ordinal endings stripped from floor numbers (3rd, 2eme, 1er, 4o)
ORDINAL_SUFFIX_PATTERN = r'^(\d+)(st|nd|rd|th|er|re|e|eme|ieme|o|a)$'

# Frequent short words used to guess the language of a place
FUNCTION_WORDS: Dict[str, frozenset] = {
    'en': frozenset({'the', 'of', 'and', 'street', 'road', 'avenue', 'lane', 'north', 'south'}),
    'fr': frozenset({'de', 'du', 'des', 'le', 'la', 'les', 'rue', 'chemin', 'avenue', 'sur'}),
    'de': frozenset({'der', 'die', 'das', 'und', 'am', 'im', 'an', 'strasse', 'platz', 'weg', 'gasse'}),
    'es': frozenset({'el', 'la', 'los', 'las', 'del', 'de', 'calle', 'avenida', 'plaza', 'y'}),
    'it': frozenset({'il', 'lo', 'la', 'di', 'del', 'della', 'via', 'piazza', 'corso', 'viale'}),
    'pt': frozenset({'o', 'os', 'as', 'do', 'da', 'dos', 'das', 'rua', 'praca', 'avenida', 'travessa'}),
}

# Characters that only appear in some languages
DIACRITICS: Dict[str, str] = {
    'fr': r'[àâçéèêëïîôùûœ]',
    'de': r'[äöüß]',
    'es': r'[áéíóúñ¿¡]',
    'it': r'[àèéìòù]',
    'pt': r'[ãõâêôáéíóúç]',
}
