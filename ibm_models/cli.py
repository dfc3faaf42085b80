"""
    ibm-align [options]

    Trains a word aligner on the parallel files PREFIX.f / PREFIX.e and
    prints one line of i-j links (source-target) per sentence pair.
"""
import argparse
import logging
import os.path
import sys

from .baseline import CooccurrenceAligner
from .corpus import read_bitext
from .errors import WarmStartUnavailable
from .evaluate import read_gold, score_alignments
from .lexicon import save_lexical_table, write_lexicon
from .model_one import Model1Trainer
from .model_two import Model2Trainer


def build_parser():
    ap = argparse.ArgumentParser(description="IBM Model 1/2 word alignment")
    ap.add_argument("-d", "--data", dest="train", default="data/hansards",
                    help="Data filename prefix (default=data/hansards)")
    ap.add_argument("-e", "--english", dest="english", default="e",
                    help="Suffix of English (target) filename (default=e)")
    ap.add_argument("-f", "--french", dest="french", default="f",
                    help="Suffix of French (source) filename (default=f)")
    ap.add_argument("-n", "--num_sentences", dest="num_sents", default=None, type=int,
                    help="Number of sentences to use for training and alignment")
    ap.add_argument("-m", "--model", dest="model", default="two", choices=["one", "two", "pmi"],
                    help="Aligner to run (default=two)")
    ap.add_argument("-s", "--stemming", action="store_true", dest="stem", default=False,
                    help="lowercase and stem tokens with nltk")
    ap.add_argument("--max-iterations", type=int, default=None,
                    help="EM iteration cap (default 50 for model one, 100 for model two)")
    ap.add_argument("--increase-ratio", type=float, default=1.0005,
                    help="minimum log-likelihood improvement ratio to keep iterating")
    ap.add_argument("--warm-start", default=None, metavar="PATH",
                    help="pickled Model 1 lexical table to start Model 2 from")
    ap.add_argument("--save-lexicon", default=None, metavar="PATH",
                    help="pickle the final lexical table here")
    ap.add_argument("--lexicon", default=None, metavar="PATH",
                    help="write the final lexical table as TSV here")
    ap.add_argument("--lexicon-threshold", type=float, default=0.0,
                    help="skip lexicon entries at or below this probability")
    ap.add_argument("--gold", default=None, metavar="PATH",
                    help="gold alignments to score against (i-j sure, i?j possible)")
    ap.add_argument("--progress", action="store_true", default=False,
                    help="show a progress bar for each E-step")
    ap.add_argument("-v", "--verbose", action="store_true", default=False,
                    help="debug logging")
    return ap


def train_aligner(opts, bitext):
    options = dict(increase_ratio=opts.increase_ratio, show_progress=opts.progress)
    if opts.model == "pmi":
        return CooccurrenceAligner().train(bitext), None

    if opts.model == "one":
        aligner = Model1Trainer(max_iterations=opts.max_iterations, **options)
        return aligner, aligner.train(bitext)

    if opts.warm_start:
        aligner = Model2Trainer.from_lexicon_file(opts.warm_start, max_iterations=opts.max_iterations,
                                                  **options)
    else:
        model_one = Model1Trainer(**options)
        aligner = Model2Trainer(warm_start=model_one.train(bitext),
                                max_iterations=opts.max_iterations, **options)
    lexical, _ = aligner.train(bitext)
    return aligner, lexical


def main(argv=None):
    opts = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if opts.verbose else logging.INFO,
                        format='%(asctime)s %(levelname)s %(message)s')

    f_data = "%s.%s" % (opts.train, opts.french)
    e_data = "%s.%s" % (opts.train, opts.english)
    if not (os.path.isfile(f_data) and os.path.isfile(e_data)):
        sys.stderr.write(__doc__.strip("\n\r") + "\n")
        return 1

    bitext = read_bitext(opts.train, opts.french, opts.english, opts.num_sents, opts.stem)
    try:
        aligner, lexical = train_aligner(opts, bitext)
    except WarmStartUnavailable as e:
        logging.error("%s", e)
        return 1

    if lexical is not None:
        if opts.save_lexicon:
            save_lexical_table(lexical, opts.save_lexicon)
            logging.info("Saved lexical table to %s", opts.save_lexicon)
        if opts.lexicon:
            write_lexicon(lexical, opts.lexicon, opts.lexicon_threshold)

    alignments = [aligner.align(pair) for pair in bitext]
    for alignment in alignments:
        sys.stdout.write(alignment.to_line() + "\n")

    if opts.gold:
        score = score_alignments(alignments, read_gold(opts.gold))
        sys.stderr.write("Precision = %f\nRecall = %f\nAER = %f\n" % score)
    return 0


if __name__ == "__main__":
    sys.exit(main())
