# chimielab

Small chemistry toolkit for seventh-grade lessons. It balances chemical
reactions with exact fraction arithmetic, works through percent-concentration
and solution-volume problems step by step, shows basic facts about a few
elements, and runs short multiple-choice quizzes whose grades are stored in an
SQLite file.

User-facing texts (step-by-step solutions, explanations, quiz questions and
messages) are in Romanian.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides the `chimielab` command. A subcommand is
required:

```
chimielab --help
chimielab balance "H3PO4 + Mg(OH)2 -> Mg3(PO4)2 + H2O"
chimielab percent 20 200          # solute mass, solution mass (g)
chimielab volume 0.5 2            # moles, molar concentration (mol/L)
chimielab element He
chimielab quiz Test1 --user elev
chimielab quiz Test2 --user elev --answers 1,1,2,-,1
chimielab catalog --user elev
```

- `balance` prints the balanced reaction and an atom-by-atom explanation.
- `percent` and `volume` print the worked solution.
- `element` prints the name, atomic number and atomic mass of `H`, `He` or
  `Li`; other symbols are reported as having no details.
- `quiz` runs `Test1` or `Test2`. Without `--answers` it asks each question in
  turn; with `--answers`, choices are numbered from 1, separated by commas,
  and `-` (or nothing) leaves a question unanswered. The grade is written to
  the database given by `--db` (default `rezultate.db`); if that fails, a
  `Eroare BD` message goes to standard error and the grade is still printed.
- `catalog` lists stored results, optionally for one `--user`, from `--db`.

On invalid input the command prints `Eroare: ...` to standard error and
exits with status 1.

## Library use

### Chemical formulas

```python
from chimielab.formula import parse_formula, is_valid_element, split_terms, UnknownElementError

parse_formula("H2O")             # {"H": 2, "O": 1}
is_valid_element("He")           # True
split_terms(" H2 + O2 ", "+")    # ["H2", "O2"]
parse_formula("Xx2")             # raises UnknownElementError
```

Element symbols are checked against the periodic table, and counts that follow
a symbol are added up; the result is ordered by symbol. Characters that are not
letters are skipped, so groups in parentheses are not multiplied out and a
number after a closing bracket is ignored.

### Balancing reactions

```python
from chimielab.balance import solve_reaction, balance_equation, InvalidEquationError, NoSolutionError

reaction = solve_reaction("H2 + O2 -> H2O")
reaction.equation()        # "2H2 + O2 = 2H2O"
reaction.coefficients      # (2, 1, 2)
reaction.atom_totals()     # atom counts for the reactant and product sides
print(reaction.report())   # balanced reaction followed by the explanation

balance_equation(["H2", "O2"], ["H2O"])   # [2, 1, 2]
```

`solve_reaction` returns a `BalancedReaction` and raises
`InvalidEquationError` when the text has no `->`; both functions raise
`NoSolutionError` when only the trivial solution exists.

### Concentration and volume problems

```python
from chimielab.problems import parse_number, percent_concentration, solution_volume

solution = percent_concentration(solute_mass=20, solution_mass=200)
solution.result    # 10.0
print(solution)    # worked steps, ending with "c% = 10.00 %"

volume = solution_volume(moles=0.5, molarity=2)
volume.result      # 0.25
```

Both return a `StepSolution` with `result`, `text` and `lines`. Values may be
numbers or text. Non-numeric text, or a solution mass or molarity that is not
positive, raises `InvalidInputError`.

### Element details

```python
from chimielab.elements import element_info, element_details

info = element_info("He")     # ElementInfo, or None if unknown
print(element_details("He"))  # "Heliu\nNr. Atomic: 2\nMasa atomică: 4.0026"
```

Details are only known for hydrogen, helium and lithium; `element_details`
returns an empty string for any other symbol.

### Quizzes

```python
from chimielab.quiz import get_quiz, quiz_names, ResultStore

quiz_names()                       # ["Test1", "Test2"]
quiz = get_quiz("Test1")
answers = [0, 1, 2, 1, None]       # choice indexes; None means unanswered
quiz.score(answers)                # 4
quiz.grade(answers)                # 8

with ResultStore("rezultate.db") as store:
    store.record("elev", 8, "Test1")        # timestamp defaults to now
    store.results("elev")                   # list of QuizResult, in recorded order
```

Each question has four choices and one correct answer; the grade is the number
of correct answers times ten, divided by the number of questions, rounded
down. `ResultStore()` without a path keeps results in memory only.

## What it does not do

There is no graphical interface: everything runs from the command line or as
a library. Quiz results are kept only in a local SQLite file, with no user
accounts or login. Element details cover just three elements, and there are
no further problem types or quizzes beyond those listed above.