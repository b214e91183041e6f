"""
Collect the language tags a web page declares and check them.

Tags come from lang, xml:lang and hreflang attributes, from
<meta http-equiv="content-language"> and from the Content-Language
response header.  Each one is parsed and tallied: well-formed or not,
which language/script/region it names, private-use and grandfathered
subtags, and which errors the malformed ones hit.
"""
import sys
import argparse
import time
from collections import Counter
from json import dumps

import requests
from bs4 import BeautifulSoup as bs

from acceptlang import make_accept_language
from validlang import check_tag

PARSER = "html.parser"
DEFAULT_TIMEOUT = 60
USER_AGENT = "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_11_2) " \
             "AppleWebKit/601.3.9 (KHTML, like Gecko) " \
             "Version/9.0.2 Safari/601.3.9"


def _split_tags(value):
    return [s.strip() for s in value.split(',') if s.strip()]


def extract_language_tags(soup):
    """Return a Counter of the raw language tags declared in a parsed document."""
    found = Counter()
    for el in soup.find_all(True):
        for attr in ('lang', 'xml:lang', 'hreflang'):
            if attr in el.attrs:
                ltag = el.attrs[attr].strip()
                if ltag:
                    found[ltag] += 1
        if el.name == 'meta':
            xdict = {key.lower(): val for key, val in el.attrs.items()}
            if xdict.get('http-equiv', '').lower() == 'content-language':
                found.update(_split_tags(xdict.get('content', '')))
    return found


def fetch_page(url, langpref='', timeout=DEFAULT_TIMEOUT, verbose=0):
    """
    GET url, optionally with an Accept-Language header.

    Return a result record; request failures are recorded in its
    'errors' list rather than raised.
    """
    reqheaders = {"User-Agent": USER_AGENT}
    if langpref:
        reqheaders['Accept-Language'] = langpref

    results = {'url': url, 'errors': [], 'success': False,
               'status_code': None, 'content_language': '', 'content': ''}
    results['start'] = time.time()
    if verbose > 1:
        print("Making request to {} with headers {}".format(url, reqheaders))

    try:
        response = requests.get(url, allow_redirects=True, headers=reqheaders,
                                timeout=timeout)
    except requests.RequestException as e:
        results['errors'].append(str(e))
    else:
        results['success'] = True
        results['url'] = response.url
        results['status_code'] = response.status_code
        results['content_language'] = \
            response.headers.get('content-language', '')
        results['content'] = response.text
        response.close()

    results['end'] = time.time()
    return results


def tally_tags(tags):
    """
    Parse each tag and count what turned up.

    tags may be any iterable of strings or a Counter of tag -> occurrences.
    """
    if not isinstance(tags, Counter):
        tags = Counter(tags)

    tally = {name: Counter() for name in (
        'wellformed', 'malformed', 'language', 'script', 'region',
        'private', 'grandfathered', 'errors')}

    for rawt, ct in tags.items():
        schema, warnings = check_tag(rawt)
        if warnings or schema.is_empty():
            tally['malformed'][rawt] += ct
            for _, code, _ in warnings:
                tally['errors'][code] += ct
            continue

        tally['wellformed'][rawt] += ct
        if schema.irregular or schema.regular:
            tally['grandfathered'][schema.irregular or schema.regular] += ct
            continue
        if schema.language:
            tally['language'][schema.language.lower()] += ct
        if schema.script:
            tally['script'][schema.script.title()] += ct
        if schema.region:
            tally['region'][schema.region.upper()] += ct
        for subtag in schema.privateuse:
            tally['private'][subtag.lower()] += ct
    return tally


def scan(urls=(), infiles=(), langpref='', timeout=DEFAULT_TIMEOUT,
         verbose=0):
    """Gather tags from urls and local HTML files; return (tally, records)."""
    alltags = Counter()
    records = []

    for url in urls:
        rec = fetch_page(url, langpref, timeout, verbose)
        if rec['success']:
            soup = bs(rec['content'], PARSER)
            found = extract_language_tags(soup)
            found.update(_split_tags(rec['content_language']))
            if verbose:
                print("{} -> {}: {}".format(url, rec['status_code'],
                                            dict(found)))
        else:
            found = Counter()
            print("{} -> {}".format(url, ','.join(rec['errors'])))
        del rec['content']
        rec['tags'] = dict(found)
        records.append(rec)
        alltags.update(found)

    for fname in infiles:
        with open(fname) as infile:
            soup = bs(infile.read(), PARSER)
        found = extract_language_tags(soup)
        if verbose:
            print("{}: {}".format(fname, dict(found)))
        records.append({'file': fname, 'tags': dict(found)})
        alltags.update(found)

    return tally_tags(alltags), records


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Find and check the language tags declared by web pages.')
    parser.add_argument('-u', '--url', dest='urls', action='append',
                        default=[], help='URL to fetch (may be repeated)')
    parser.add_argument('-i', '--infile', dest='infiles', action='append',
                        default=[], help='Local HTML file (may be repeated)')
    parser.add_argument('-l', '--langpref', dest='langpref', action='append',
                        default=[],
                        help='Language to put in Accept-Language, most '
                             'preferred first (may be repeated)')
    parser.add_argument('-t', '--timeout', dest='timeout', type=float,
                        default=DEFAULT_TIMEOUT, help='Request timeout (sec)')
    parser.add_argument('-v', '--verbose', dest='verbose', action='count',
                        default=0, help='Turn on verbose output.')
    args = parser.parse_args(argv)

    if not args.urls and not args.infiles:
        parser.print_usage()
        return 1

    langpref = make_accept_language(args.langpref)
    tally, records = scan(args.urls, args.infiles, langpref, args.timeout,
                          args.verbose)
    if args.verbose > 1:
        for rec in records:
            print(dumps(rec))
    print(dumps({name: dict(ctr) for name, ctr in tally.items()}))
    return 0


if __name__ == '__main__':
    sys.exit(main())
