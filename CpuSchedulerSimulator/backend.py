import logging

from process import ProcessRecord, Queue

LOG_FILE = "cpu_scheduler.log"
LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(verbose=False, filename=LOG_FILE):
    logging.basicConfig(filename=filename, level=logging.DEBUG if verbose else logging.INFO,
                        format=LOG_FORMAT)


def log_action(action):
    logging.info(action)


def _parse_record(fields):
    pid, arrival, burst, priority = (int(f) for f in fields)
    if arrival < 0 or burst <= 0:
        raise ValueError(f"arrival must be >= 0 and burst > 0, got arrival={arrival} burst={burst}")
    return ProcessRecord(pid, arrival, burst, priority)


def read_records(lines, limit=0):
    """
    Parse `pid arrival burst priority` records from whitespace-delimited text.

    Records are read as a stream of integer tokens, so line breaks carry no
    meaning. A positive `limit` caps the number of records. Import stops
    quietly at the end of the text or at the first record that does not yield
    four valid integers; everything read before that point is kept.
    """
    queue = Queue()
    fields = []
    for line in lines:
        for token in line.split():
            fields.append(token)
            if len(fields) < 4:
                continue
            try:
                record = _parse_record(fields)
            except ValueError as e:
                logger.warning("import stopped at record %d (%s): %s", queue.count + 1, " ".join(fields), e)
                return queue
            fields = []
            queue.enqueue(record)
            if 0 < limit <= queue.count:
                return queue
    if fields:
        logger.warning("import stopped at record %d: incomplete record %r", queue.count + 1, " ".join(fields))
    return queue


def load_processes(path, limit=0):
    # undecodable bytes become U+FFFD and stop import like any other bad token
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        queue = read_records(f, limit)
    log_action(f"Imported {queue.count} processes from {path}")
    return queue


def format_result(record):
    return f"{record.pid} {record.arrival} {record.finish} {record.waiting}"


def write_results(path, completed):
    with open(path, "w", encoding="utf-8") as f:
        for record in completed:
            f.write(format_result(record) + "\n")
    log_action(f"Wrote {completed.count} results to {path}")
