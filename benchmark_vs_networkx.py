# =============================
# Fundamental cycle basis (FCB) benchmark
# Compares NetworkX, igraph, rustworkx and cyclebasis (Paton)
# =============================

import time
import sys


# NetworkX (pure Python graph library)
try:
    import networkx as nx
except ImportError:
    print("Error: networkx not found, install it with:")
    print("  pip install networkx")
    sys.exit(1)


# igraph (C implementation, fundamental_cycles)
try:
    import igraph as ig
except (ImportError, OSError) as e:
    print(f"Warning: could not load igraph ({e}), skipping igraph comparison.")
    ig = None


# rustworkx (Rust implementation, cycle_basis is Paton as well)
try:
    import rustworkx as rx
except (ImportError, OSError):
    rx = None


from cyclebasis import CycleUtils, paton_cycle_basis


def total_length(basis):
    return sum(len(c) for c in basis)


# =============================
# Benchmark a single case
# Input: case name, networkx graph
# =============================
def benchmark_one_case(case_name, G):
    """
    Time every available implementation on G and check the basis size
    against the cyclomatic number.
    """
    print(f"\n--- {case_name} ---")
    print(f"Nodes: {G.number_of_nodes()}, Edges: {G.number_of_edges()}")

    beta = CycleUtils.cyclomatic_number(G)
    edges = list(G.edges())

    # 1. NetworkX
    start_nx = time.time()
    nx_basis = nx.cycle_basis(G)
    nx_time = time.time() - start_nx
    print(f"[NetworkX]   Time: {nx_time:.4f}s | Basis Weight: {total_length(nx_basis)} | Count: {len(nx_basis)}")

    # 2. igraph (nodes must be 0..N-1)
    ig_time = -1.0
    if ig is not None:
        try:
            mapping = {n: i for i, n in enumerate(G.nodes())}
            g_ig = ig.Graph(n=len(mapping), edges=[(mapping[u], mapping[v]) for u, v in edges], directed=False)

            start_ig = time.time()
            ig_basis = g_ig.fundamental_cycles()
            ig_time = time.time() - start_ig
            print(f"[igraph (C)] Time: {ig_time:.4f}s | Basis Weight: {total_length(ig_basis)} | Count: {len(ig_basis)}")
        except Exception as e:
            print(f"[igraph] Failed: {e}")

    # 3. rustworkx (nodes must be 0..N-1)
    rx_time = -1.0
    if rx is not None:
        try:
            mapping_rx = {n: i for i, n in enumerate(G.nodes())}
            py_graph = rx.PyGraph()
            py_graph.add_nodes_from(range(len(mapping_rx)))
            py_graph.add_edges_from_no_data([(mapping_rx[u], mapping_rx[v]) for u, v in edges])

            start_rx = time.time()
            rx_basis = rx.cycle_basis(py_graph)
            rx_time = time.time() - start_rx
            print(f"[rustworkx]  Time: {rx_time:.4f}s | Basis Weight: {total_length(rx_basis)} | Count: {len(rx_basis)}")
        except Exception as e:
            print(f"[rustworkx] Failed: {e}")

    # 4. cyclebasis
    start_my = time.time()
    my_basis = paton_cycle_basis(G)
    my_time = time.time() - start_my
    print(f"[cyclebasis] Time: {my_time:.4f}s | Basis Weight: {total_length(my_basis)} | Count: {len(my_basis)}")

    speedup_nx = nx_time / my_time if my_time > 0 else 0.0
    print(f"Speedup vs NetworkX: {speedup_nx:.2f}x")
    if ig_time > 0:
        print(f"Speedup vs igraph:   {ig_time / my_time if my_time > 0 else 0.0:.2f}x")
    if rx_time > 0:
        print(f"Speedup vs rustworkx:{rx_time / my_time if my_time > 0 else 0.0:.2f}x")

    # 5. Correctness
    if len(my_basis) == beta == len(nx_basis):
        print(f"OK: basis size {beta} matches cyclomatic number")
    else:
        print(f"MISMATCH: cyclebasis={len(my_basis)} networkx={len(nx_basis)} beta={beta}")


def main():
    print("=========================================")
    print("Benchmark: cyclebasis vs networkx.cycle_basis")
    print("=========================================")

    # Case 1: sparse random graph (Erdos-Renyi)
    G1 = nx.erdos_renyi_graph(n=500, p=0.01, seed=42)
    benchmark_one_case("Random Sparse Graph (n=500, p=0.01)", G1)

    # Case 2: grid graph
    G2 = nx.convert_node_labels_to_integers(nx.grid_2d_graph(60, 60))
    benchmark_one_case("Grid Graph (60x60)", G2)

    # Case 3: denser random graph
    G3 = nx.gnp_random_graph(300, 0.1, seed=2024)
    benchmark_one_case("Random Graph (n=300, p=0.1)", G3)

    # Case 4: wheel graph
    G4 = nx.wheel_graph(2000)
    benchmark_one_case("Wheel Graph (n=2000)", G4)

    # Case 5: scale-free, several components
    G5 = nx.disjoint_union(nx.barabasi_albert_graph(1000, 3, seed=7), nx.hypercube_graph(8))
    benchmark_one_case("Barabasi-Albert (n=1000) + Hypercube (d=8)", G5)


if __name__ == "__main__":
    main()
