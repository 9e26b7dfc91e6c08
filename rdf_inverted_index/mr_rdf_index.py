from mrjob.job import MRJob
from mrjob.protocol import JSONProtocol
from mrjob.step import MRStep
import logging
import time

from rdf_inverted_index.config import (
    COUNTER_GROUP, DEFAULT_DOC_END_MARKER, DEFAULT_NUM_REDUCERS,
)
from rdf_inverted_index.grouping import reduce_postings
from rdf_inverted_index.pipeline import DocumentIndexer
from rdf_inverted_index.stopwords import StopWords
from rdf_inverted_index.tokens import TokenClassifier

logger = logging.getLogger(__name__)


class MRRDFInvertedIndex(MRJob):
    """RDF/XML documents in, one sorted postings list per pivot key out.

    Each input file goes to a single map task whole, so documents are
    never cut at split boundaries.
    """

    OUTPUT_PROTOCOL = JSONProtocol

    def configure_args(self):
        super().configure_args()
        self.add_passthru_arg(
            '--doc-end-marker', default=DEFAULT_DOC_END_MARKER,
            help='text that closes one input document (default: %(default)s)')
        self.add_passthru_arg(
            '--num-reducers', type=int, default=DEFAULT_NUM_REDUCERS,
            help='number of reduce tasks')
        self.add_file_arg(
            '--stop-words',
            help='file of stop words, one per line (default: built-in English list)')

    def jobconf(self):
        conf = super().jobconf()
        if self.options.num_reducers:
            conf['mapreduce.job.reduces'] = str(self.options.num_reducers)
        return conf

    def make_indexer(self):
        if self.options.stop_words:
            stop_words = StopWords.from_file(self.options.stop_words)
        else:
            stop_words = StopWords()
        return DocumentIndexer(
            self.options.doc_end_marker,
            classifier=TokenClassifier(stop_words),
        )

    def mapper_raw(self, input_path, input_uri):
        indexer = self.make_indexer()

        # lines keep their newlines, fragments are joined as is
        with open(input_path, 'r', encoding='utf-8') as f:
            for line in f:
                for key, value in indexer.feed(line):
                    yield key.to_record(), value

        indexer.finish()
        logger.info(f"Map task done for {input_uri}: {dict(indexer.stats)}")
        for name, amount in indexer.stats.items():
            self.increment_counter(COUNTER_GROUP, name, amount)

    def reducer(self, key, values):
        yield key, reduce_postings(values)

    def steps(self):
        return [MRStep(mapper_raw=self.mapper_raw,
                       reducer=self.reducer)]


def main():
    start_time = time.time()
    succeeded = False
    try:
        MRRDFInvertedIndex.run()
        succeeded = True
    except SystemExit as e:
        succeeded = not e.code
        raise
    finally:
        logger.info("Job successful!" if succeeded else "Job failed.")
        logger.info(f"Job Finished in {time.time() - start_time:.3f} seconds")


if __name__ == '__main__':
    main()
