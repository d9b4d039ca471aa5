from starfinder.catalog import filter_visible_stars, read_tycho2_catalog, stars_to_dataframe

if __name__ == "__main__":
    raw_tycho2 = read_tycho2_catalog("../data/tycho2/catalog.dat", progress=True)
    reduced_tycho2 = filter_visible_stars(raw_tycho2, dimmest_magnitude=12)
    stars_to_dataframe(reduced_tycho2).to_csv("../data/tycho2/reduced_tycho2.csv", index=False)
