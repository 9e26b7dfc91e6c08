from pyspark.sql import SparkSession
import logging
import sys
import time

from rdf_inverted_index.config import DEFAULT_DOC_END_MARKER
from rdf_inverted_index.grouping import reduce_postings
from rdf_inverted_index.output import format_record
from rdf_inverted_index.pipeline import DocumentIndexer

logger = logging.getLogger(__name__)

USAGE = ("Usage: spark-submit spark_rdf_index.py <input_path> <output_path> "
         "[num_reducers] [doc_end_marker]")


def emit_file(path, content, marker=DEFAULT_DOC_END_MARKER):
    # one indexer per file, so documents never straddle partitions
    indexer = DocumentIndexer(marker)
    for line in content.splitlines(keepends=True):
        yield from indexer.feed(line)
    indexer.finish()
    logger.info(f"File done {path}: {dict(indexer.stats)}")


def build_postings_rdd(files, marker=DEFAULT_DOC_END_MARKER, num_reducers=None):
    """RDD of (path, content) -> RDD of (PivotKey, sorted postings)."""
    entries = files.flatMap(lambda kv: emit_file(kv[0], kv[1], marker))
    grouped = entries.groupByKey(numPartitions=num_reducers)
    return grouped.mapValues(reduce_postings)


def build_rdf_index(input_file, output_file, num_reducers=None,
                    marker=DEFAULT_DOC_END_MARKER):
    spark = SparkSession.builder.appName("RDFInvertedIndex").getOrCreate()

    try:
        files = spark.sparkContext.wholeTextFiles(input_file)
        postings = build_postings_rdd(files, marker, num_reducers)

        # save one record per key
        postings.sortByKey() \
            .map(lambda kv: format_record(kv[0], kv[1])) \
            .saveAsTextFile(output_file)
    finally:
        spark.stop()

    print("Done! Check the output directory.")


def main(argv=None):
    argv = sys.argv if argv is None else argv
    if len(argv) not in (3, 4, 5):
        print(USAGE)
        sys.exit(1)

    input_path = argv[1]
    output_path = argv[2]
    try:
        num_reducers = int(argv[3]) if len(argv) > 3 else None
    except ValueError:
        print(f"num_reducers must be an integer, got {argv[3]!r}")
        print(USAGE)
        sys.exit(1)
    marker = argv[4] if len(argv) > 4 else DEFAULT_DOC_END_MARKER

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s [%(levelname)s] [RDFIndex] %(message)s'
    )

    start_time = time.time()
    try:
        build_rdf_index(input_path, output_path, num_reducers, marker)
    except Exception:
        logger.error("Job failed.")
        raise
    else:
        logger.info("Job successful!")
    finally:
        logger.info(f"Job Finished in {time.time() - start_time:.3f} seconds")


if __name__ == "__main__":
    main()
