import logging
from itertools import islice

from nltk.stem import PorterStemmer, SnowballStemmer

from .alignment import SentencePair


def tokenize(sentence, lower=False):
    sentence = sentence.strip()
    if lower:
        sentence = sentence.lower()
    return sentence.split()


def stem_bitext(bitext, f_language="french", e_language="english"):
    """ Replace every token by its stem. English uses Porter, others Snowball. """
    f_stemmer = PorterStemmer() if f_language == "english" else SnowballStemmer(f_language)
    e_stemmer = PorterStemmer() if e_language == "english" else SnowballStemmer(e_language)
    return [
        SentencePair([f_stemmer.stem(token) for token in pair.source],
                     [e_stemmer.stem(token) for token in pair.target])
        for pair in bitext
    ]


def read_bitext(prefix, f_suffix="f", e_suffix="e", num_sents=None, stem=False):
    """ Read prefix.f (source) and prefix.e (target), one sentence per line. """
    f_data = "%s.%s" % (prefix, f_suffix)
    e_data = "%s.%s" % (prefix, e_suffix)
    logging.info("Reading lines of %s and %s...", f_data, e_data)

    with open(f_data, encoding="utf-8") as f_file, open(e_data, encoding="utf-8") as e_file:
        lines = islice(zip(f_file, e_file), num_sents)
        bitext = [SentencePair(tokenize(f, lower=stem), tokenize(e, lower=stem)) for (f, e) in lines]

    if stem:
        bitext = stem_bitext(bitext)
    logging.info("Read %d sentence pairs", len(bitext))
    return bitext
