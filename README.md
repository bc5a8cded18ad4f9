# searchlab

A small collection of classic algorithms from an introductory AI and
algorithms course. Each one can be used as a Python function and as an
interactive command:

| Module                     | What it does                                             | Command(s)                       |
|----------------------------|----------------------------------------------------------|----------------------------------|
| `searchlab.puzzle`         | A* search for the 8-puzzle with the Manhattan heuristic  | `searchlab-puzzle`               |
| `searchlab.nqueens`        | All solutions of the N-queens problem by backtracking    | `searchlab-nqueens`              |
| `searchlab.traversal`      | Breadth-first and depth-first traversal from vertex 0    | `searchlab-bfs`, `searchlab-dfs` |
| `searchlab.shortest_path`  | Dijkstra's single-source shortest paths on a matrix      | `searchlab-dijkstra`             |
| `searchlab.mst`            | Prim's minimum spanning tree on a matrix                 | `searchlab-prim`                 |
| `searchlab.sorting`        | Selection sort                                           | `searchlab-sort`                 |
| `searchlab.chatbot`        | A keyword-driven customer-support chatbot                | `searchlab-chatbot`              |

The package has no runtime dependencies and needs Python 3.10 or later.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Using the commands

Every command prompts for its input and reads it from standard input, so it
can be typed in or piped from a file. Input is read as whitespace-separated
integers, so line breaks do not matter. When the input is malformed, ends
early or is rejected by the algorithm, the command prints `error: ...` on
standard error and exits with status 1.

### 8-puzzle

Enter the nine tiles of the start and the goal state row by row, with `-1`
for the empty tile:

```
$ searchlab-puzzle
Enter Start State (Use -1 for empty tile):
2 8 3 -1 1 4 7 6 5
Enter Goal State (Use -1 for empty tile):
1 2 3 8 -1 4 7 6 5
```

Both states must have exactly nine tiles, exactly one `-1`, and the same set
of tiles. The command prints every board on a shortest path from the start to
the goal (`_` marks the blank), then `Total Moves: N`. If the goal cannot be
reached it prints `No solution found.`

### N-queens

```
$ searchlab-nqueens
Enter size of chessboard: 4
```

Every solution is printed as a board (`Q` for a queen, `X` for an empty
square), followed by the number of solutions and the time taken in seconds.

### Graph traversal

Enter the number of vertices, the number of edges, and then each edge as a
pair of vertex numbers (vertices are numbered from 0). Edges are undirected.

```
$ searchlab-bfs
$ searchlab-dfs
```

The output lists the vertices reachable from vertex 0, in breadth-first or
depth-first order. Neighbours are visited in the order their edges were
entered.

### Shortest paths and spanning trees

Both commands take the number of vertices followed by an adjacency matrix in
which `0` means "no edge".

```
$ searchlab-dijkstra
$ searchlab-prim
```

`searchlab-dijkstra` then asks for a source vertex and prints a table of
distances from it; vertices that cannot be reached are shown as `INF`.
`searchlab-prim` prints the edges of a minimum spanning tree grown from
vertex 0 with their weights; it reports an error if the graph is not
connected.

### Sorting

Enter how many numbers follow, then the numbers:

```
$ searchlab-sort
```

### Chatbot

```
$ searchlab-chatbot
```

The bot understands `hi`, `hello`, `price`, `cost`, `help`, `bye` and `exit`,
matched as whole lines without regard to case. `bye`, `exit` or the end of
input ends the conversation.

## Using the library

```python
from searchlab.traversal import build_adjacency, bfs, dfs

adjacency = build_adjacency(4, [(0, 1), (0, 2), (1, 3)])
print(bfs(adjacency))   # [0, 1, 2, 3]
print(dfs(adjacency))   # [0, 1, 3, 2]
```

`build_adjacency` raises `ValueError` for a negative vertex count or an edge
that names a vertex out of range.

```python
from searchlab.puzzle import format_state, manhattan_distance, neighbors, solve

start = [2, 8, 3, -1, 1, 4, 7, 6, 5]
goal = [1, 2, 3, 8, -1, 4, 7, 6, 5]
print(manhattan_distance(start, goal))
print(neighbors(start))          # blank moved up, down, left, right where possible
path = solve(start, goal)        # list of tuples from start to goal, or None
for state in path:
    print(format_state(state))
    print()
```

`solve` raises `ValueError` if a state does not have nine tiles with exactly
one blank, or if the two states hold different tiles.

```python
from searchlab.nqueens import NQueens, format_board

solver = NQueens(6)
print(solver.count())
for board in solver.solutions():   # each board is a tuple: the queen's column per row
    print(format_board(board))
    print()
```

```python
from searchlab.mst import format_edges, prim_mst
from searchlab.shortest_path import dijkstra, format_distances

graph = [
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
]
print(format_distances(dijkstra(graph, 0)))   # unreachable vertices are math.inf
print(format_edges(graph, prim_mst(graph)))   # edges are (parent, vertex) pairs
```

Both functions raise `ValueError` for a matrix that is not square;
`dijkstra` also for a source out of range, and `prim_mst` for a graph that is
not connected.

```python
from searchlab.chatbot import is_farewell, respond
from searchlab.sorting import selection_sort

print(selection_sort([5, 3, 1, 4]))   # [1, 3, 4, 5], a new list
print(respond("hello"))
print(is_farewell("bye"))             # True
```