# collectionlab

A set of small, self-contained programs that show how everyday data
structures and algorithms behave: fruit salads built on lists, deques,
sets and heaps; Caesar and homophonic ciphers; a statistical Caesar-cipher
breaker; SHA3-256 duplicate detection; PageRank; strongly connected
components; Dijkstra's shortest path; degree-based centrality; and the
dining philosophers problem.

Everything runs on the Python standard library alone.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Ciphers

Encrypt or decrypt with a Caesar shift (`--shift` defaults to 3):

```
collectionlab-caesar --message "Off to the bunker. Every person for themselves" --encrypt --shift 10
collectionlab-caesar --message "Ypp dy dro lexuob. Ofobi zobcyx pyb drowcovfoc" --decrypt --shift 10
```

Without `--message` the command encrypts and decrypts a fixed sentence
to show the round trip. With a message but neither `--encrypt` nor
`--decrypt` it asks you to choose one.

From Python:

```python
from collectionlab.caesar import encrypt, decrypt

secret = encrypt("the quick brown fox", 3)
assert decrypt(secret, 3) == "the quick brown fox"
```

Only ASCII letters are shifted; everything else is kept as it is.
`encrypt` accepts shifts from 0 to 255 and `decrypt` from 0 to 26; other
values raise `ValueError`.

Break a Caesar cipher by letter-frequency analysis, or print the letter
statistics of a message:

```
collectionlab-decoder --message "Ypp dy dro lexuob. Ofobi zobcyx pyb drowcovfoc" --guess
collectionlab-decoder --message "some text" --stats
```

`collectionlab.decoder.guess_shift(text, depth)` tries every shift below
`depth` and returns a `ShiftGuess` with the best shift, its score, the
decrypted text and the score of every shift tried;
`stats_analysis(text)` returns one `LetterStats` per distinct character,
and `english_frequencies()` gives the reference percentages used.

Build a random homophonic cipher and show the mapping (the plaintext is
optional; a fixed sentence is used without it):

```
collectionlab-homophonic
collectionlab-homophonic "attack at dawn"
```

`collectionlab.homophonic.homophonic_cipher(plaintext, rng)` returns the
ciphertext and the mapping; characters that are not letters are dropped.

## Hashing

Generate a shuffled list of phrases with random repeats and report the
duplicates by their SHA3-256 digest:

```
collectionlab-dupes
collectionlab-dupes --seed 42
```

`collectionlab.dupes.analyze_duplicates(phrases)` returns a
`DuplicateReport`, and `format_report(report)` renders it as text.

## Graphs

```
collectionlab-pagerank         # PageRank of five linked sports sites
collectionlab-community        # strongly connected communities in a retweet chain
collectionlab-shortest-path    # shortest walk from Belem Tower to Lisbon Cathedral
collectionlab-centrality       # closeness centrality of a small fight network
```

`collectionlab-pagerank` takes `--damping` (default 0.85) and
`--iterations` (default 100).

The pieces are usable on their own: `PageRank(damping, iterations).rank(graph)`
takes an adjacency list; `build_graph` and `kosaraju_scc` in
`collectionlab.community` find strongly connected components;
`dijkstra(graph, start, goal)` in `collectionlab.shortest_path` returns the
distances it settled, and `build_lisbon_graph()` gives the sample map;
`closeness_centrality(fighters, fights)` in `collectionlab.centrality`
computes the centrality table and `explain(name, closeness)` describes it.

## Collections

Weigh programming languages from 1 (newest) to 100 (oldest):

```
collectionlab-languages
```

Fruit salads, one subcommand per collection (`--seed` goes before the
subcommand):

```
collectionlab-salads heap          # draw until two figs, figs served last
collectionlab-salads sets          # sorted sets of 1, 3, 5, 7 and 9 fruits
collectionlab-salads deque         # shuffled, with fruits added at both ends
collectionlab-salads linked-list   # the same salad built at both ends
collectionlab-salads vector        # a shuffled list
collectionlab-salads mutable       # a list with figs appended
collectionlab-salads hashset       # distinct fruits in 100 random draws
collectionlab-salads --seed 7 salad --number 4
```

Counting tools:

```
collectionlab-tally count            # frequencies of a sample list of numbers
collectionlab-tally count 1 2 2 3    # frequencies of your own numbers
collectionlab-tally add              # the sum of a fixed vector
collectionlab-tally csv < data.csv   # print each CSV record after the header
```

`collectionlab.tally.read_csv_records(stream)` yields CSV records from a
text stream, skipping the header row and blank lines, and raises
`ValueError` when a record's field count differs from the previous one.

## Fruit salad command lines

Shuffle fruits given on the command line or read from a CSV file:

```
collectionlab-fruit-salad --fruits "apple, pear, fig"
collectionlab-fruit-salad fruits.csv
```

Pick random fruits, optionally writing them one per line to a file:

```
collectionlab-portugal-fruits --count 5 --output fruits.txt
```

Re-read a fruit file (`fruits.csv` in the current directory unless
`--path` is given) and print a fresh salad each round, forever unless
`--iterations` limits it:

```
collectionlab-lowmem-salad
collectionlab-lowmem-salad --path fruits.csv --iterations 3
```

## Dining philosophers

Fifteen philosophers share four forks; each picks up forks in an order
chosen by parity so that no circular wait can form. `--eat-seconds`
sets how long each meal takes (default 1.0):

```
collectionlab-philosophers
collectionlab-philosophers --eat-seconds 0.1
```

In Python, `seat_philosophers(forks)` seats them around a list of `Fork`
objects and `dine(philosophers)` runs the meal and returns the elapsed
seconds.

## Randomness

Functions that draw random values accept an optional `rng`
(a `random.Random`) so results can be made reproducible.

## What is not included

The package works only on built-in sample data or data you pass in. It
does not fetch web pages, draw charts of data, or load tables into data
frames; the CSV tool only prints the records it reads.